"""Tests for configuration path resolution helpers."""

from pathlib import Path

from compath.config.paths import (
    _detect_repo_root,  # pyright: ignore[reportPrivateUsage]
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = (portable_repo_root / "logs").resolve()
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "compath.log"


def test_default_config_path_uses_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path() == (portable_repo_root / "config" / "compath.toml").resolve()


def test_default_config_path_honors_environment(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "custom.toml"
    assert default_config_path({"COMPATH_CONFIG": str(target)}) == target.resolve()


def test_resolve_overridable_path_precedence(tmp_path: Path) -> None:
    """Explicit paths beat the environment, which beats the default."""

    explicit = tmp_path / "explicit"
    from_env = tmp_path / "env"
    fallback = tmp_path / "default"

    def default_factory() -> Path:
        return fallback

    assert resolve_overridable_path(
        explicit_path=explicit, env={"VAR": str(from_env)}, env_var="VAR", default_factory=default_factory
    ) == explicit.resolve()
    assert resolve_overridable_path(
        explicit_path=None, env={"VAR": str(from_env)}, env_var="VAR", default_factory=default_factory
    ) == from_env.resolve()
    assert resolve_overridable_path(
        explicit_path=None, env={"VAR": "   "}, env_var="VAR", default_factory=default_factory
    ) == fallback.resolve()


def test_detect_repo_root_finds_marker(tmp_path: Path) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert _detect_repo_root(nested / "module.py") == tmp_path
