"""Configuration management for compath."""

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from compath.config.file_ops import write_text_file
from compath.config.paths import default_config_path
from compath.features.path import ComponentPath, PathError
from compath.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Absolute component path that relative paths resolve against by default
    default_base: str = "/"

    # Console log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    console_level: str = "INFO"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate resolution settings.

        Raises:
            ValueError: If ``default_base`` is not an absolute component path
                or ``console_level`` is not a known logging level.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        if not isinstance(self.default_base, str):
            raise ValueError(f"default_base must be a string, got {self.default_base!r}")
        try:
            base = ComponentPath(self.default_base)
        except PathError as e:
            raise ValueError(f"Invalid default_base {self.default_base!r}: {e}") from e
        if not base.is_absolute:
            raise ValueError(f"default_base must be absolute, got {self.default_base!r}")
        self.default_base = base.to_string()

        if not isinstance(self.console_level, str):
            raise ValueError(f"console_level must be a string, got {self.console_level!r}")
        level = self.console_level.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown console_level {self.console_level!r}")
        self.console_level = level

    @property
    def console_level_number(self) -> int:
        """Numeric logging level for the console handler."""
        return logging.getLevelNamesMapping()[self.console_level]

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# compath Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs in addition to the console")
        lines.append('# Example: log_file = "/path/to/logs/compath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Default base for resolving relative component paths")
        lines.append("# Must be an absolute path such as \"/\" or \"/model/bodies\"")
        lines.append(f"default_base = {self._format_toml_value(config['default_base'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object. A commented default file is
            written when none exists yet.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                for key in sorted(set(config_dict) - known):
                    logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
                    del config_dict[key]

                log_file = config_dict.get("log_file")
                if isinstance(log_file, str) and not log_file.strip():
                    config_dict["log_file"] = None

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""
        cls._instance = None


__all__ = ["Config"]
