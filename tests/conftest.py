"""Shared pytest fixtures for the compath test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from compath.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the cached instance."""

    config_file = tmp_path / "config" / "compath.toml"
    monkeypatch.setenv("COMPATH_CONFIG", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
