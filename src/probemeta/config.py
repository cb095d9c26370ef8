"""Configuration management for probemeta.

Supports loading configuration from:
1. Environment variables (PROBEMETA_*)
2. Config file (~/.probemeta/config.yaml)
3. Default values

Example config file (~/.probemeta/config.yaml):
    logging:
      level: "info"
      format: "json"
    display:
      locale: "ru_RU"
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".probemeta" / "config.yaml",
    Path.home() / ".config" / "probemeta" / "config.yaml",
    Path(".probemeta.yaml"),
]

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("json", "text")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "warning"
    format: str = "text"

    def __post_init__(self) -> None:
        # YAML may hand over numbers or booleans
        self.level = str(self.level).lower()
        self.format = str(self.format).lower()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.level!r}")
        if self.format not in LOG_FORMATS:
            raise ValueError("Log format must be 'json' or 'text'")


@dataclass
class DisplayConfig:
    """Presentation configuration."""

    # Overrides the process locale for number and unit rendering
    locale: str | None = None


@dataclass
class ProbemetaConfig:
    """Main configuration for probemeta."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations or CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    return data if isinstance(data, dict) else {}
            except (OSError, yaml.YAMLError) as e:
                print(f"Warning: Could not read config file {config_path}: {e}", file=sys.stderr)
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with PROBEMETA_ prefix."""
    return os.environ.get(f"PROBEMETA_{key}", default)


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section {name!r} must be a mapping")
    return section


def load_config(locations: list[Path] | None = None) -> ProbemetaConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (PROBEMETA_*)
    2. Config file (~/.probemeta/config.yaml)
    3. Default values

    Raises:
        ValueError: If a logging level or format is invalid, or a section
            is not a mapping
    """
    file_config = _load_yaml_config(locations)

    logging_config = _section(file_config, "logging")
    logging = LoggingConfig(
        level=_get_env("LOG_LEVEL") or logging_config.get("level", "warning"),
        format=_get_env("LOG_FORMAT") or logging_config.get("format", "text"),
    )

    display_config = _section(file_config, "display")
    locale = _get_env("LOCALE") or display_config.get("locale")
    display = DisplayConfig(
        locale=str(locale) if locale else None,
    )

    return ProbemetaConfig(logging=logging, display=display)


# Global config instance (lazy loaded)
_config: ProbemetaConfig | None = None


def get_config() -> ProbemetaConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
