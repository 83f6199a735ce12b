"""Shared path utilities for configuration and log locations.

This module centralizes how compath discovers where its own files live.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/compath.toml`` unless
  overridden by ``COMPATH_CONFIG``.
- Logs: repository-root ``<repo_root>/logs/compath.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "COMPATH_CONFIG"
_LOG_FILE_NAME: Final[str] = "compath.log"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a filesystem location honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's location.

    Returns:
        Path: Detected repository root, or the current working directory
        when no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/compath.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "compath.toml",
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / _LOG_FILE_NAME).resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
