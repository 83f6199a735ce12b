"""Test configuration management."""

from pathlib import Path

import pytest

from compath.config.config import Config
from compath.config.paths import default_config_path


def test_default_config(isolated_config: Path) -> None:
    """Default configuration resolves against the root and logs to the console only."""
    config = Config()
    assert config.log_file is None
    assert config.default_base == "/"
    assert config.console_level == "INFO"

    config.save()
    assert default_config_path() == isolated_config.resolve()
    assert isolated_config.exists()


def test_load_creates_default_file(isolated_config: Path) -> None:
    """Loading without a file writes a commented default one."""
    config = Config.load()
    assert config.default_base == "/"
    assert isolated_config.exists()


def test_save_load_toml(isolated_config: Path) -> None:
    """Saved values survive a reload."""
    _ = isolated_config
    original_config = Config(
        log_file=Path("/test/logs/compath.log"),
        default_base="/model//bodies/",
        console_level="debug",
    )
    assert original_config.default_base == "/model/bodies"
    assert original_config.console_level == "DEBUG"
    original_config.save()

    Config.reset()
    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/compath.log")
    assert loaded_config.default_base == "/model/bodies"
    assert loaded_config.console_level_number == 10


def test_singleton_behavior(isolated_config: Path) -> None:
    """Repeated loads return the cached instance until reset."""
    _ = isolated_config
    config1 = Config.load()
    config2 = Config.load()
    assert config2 is config1

    Config.reset()
    assert Config.load() is not config1


def test_empty_log_file_loads_as_none(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    _ = isolated_config.write_text('log_file = ""\ndefault_base = "/a"\n', encoding="utf-8")

    config = Config.load()
    assert config.log_file is None
    assert config.default_base == "/a"


def test_unknown_keys_are_ignored(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    _ = isolated_config.write_text('default_base = "/m"\nlegacy_option = 3\n', encoding="utf-8")

    config = Config.load()
    assert config.default_base == "/m"
    assert not hasattr(config, "legacy_option")


@pytest.mark.parametrize("base", ["relative/base", "/a/*b", "/..", 5, None])
def test_invalid_default_base_is_rejected(base: object) -> None:
    with pytest.raises(ValueError):
        _ = Config(default_base=base)  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize("level", ["chatty", 10, None])
def test_invalid_console_level_is_rejected(level: object) -> None:
    with pytest.raises(ValueError, match="console_level"):
        _ = Config(console_level=level)  # pyright: ignore[reportArgumentType]


def test_invalid_file_content_fails_load(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    _ = isolated_config.write_text('default_base = "not/absolute"\n', encoding="utf-8")

    with pytest.raises(ValueError):
        _ = Config.load()


def test_toml_comments(isolated_config: Path) -> None:
    """The saved TOML file carries guidance comments."""
    Config(default_base="/model").save()

    content = isolated_config.read_text(encoding="utf-8")

    assert "# compath Configuration File" in content
    assert "# Default base for resolving relative component paths" in content
    assert "# Log file path" in content
    assert 'default_base = "/model"' in content


def test_wrong_typed_file_values_fail_load_with_value_error(isolated_config: Path) -> None:
    """Non-string TOML values are reported as configuration errors."""
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    _ = isolated_config.write_text("default_base = 5\nconsole_level = 10\n", encoding="utf-8")

    with pytest.raises(ValueError, match="default_base"):
        _ = Config.load()
