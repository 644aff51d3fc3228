"""
Configuration models.

Parses an optional exprcalc.toml and provides typed configuration for the
REPL and for logging. Every setting has a default, so a missing file is
not an error.
"""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from exprcalc.core.errors import make_config_error

DEFAULT_CONFIG_NAME = "exprcalc.toml"
CONFIG_ENV_VAR = "EXPRCALC_CONFIG"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ReplConfig(BaseModel):
    """Interactive loop configuration."""

    model_config = ConfigDict(extra="forbid")

    prompt: str = "> "
    banner: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.WARNING

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class ExprCalcConfig(BaseModel):
    """Complete configuration."""

    repl: ReplConfig = Field(default_factory=ReplConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Pick the config file: explicit path, then $EXPRCALC_CONFIG, then ./exprcalc.toml."""
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_config(toml_path: Path | None = None) -> ExprCalcConfig:
    """
    Load configuration from exprcalc.toml.

    Args:
        toml_path: Path to the TOML file; resolved with
            ``resolve_config_path`` when omitted

    Returns:
        ExprCalcConfig with parsed values or defaults

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML or holds
            invalid values
    """
    path = resolve_config_path(toml_path)
    config = ExprCalcConfig()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise make_config_error(f"Cannot read config file: {e.strerror or e}", path) from e
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise make_config_error(f"Invalid TOML: {e}", path) from e

        config_dict = {}
        for section in ("repl", "logging"):
            if section in data:
                config_dict[section] = data[section]
        try:
            config = ExprCalcConfig.model_validate(config_dict)
        except ValidationError as e:
            first = e.errors()[0]
            section = str(first["loc"][0]) if first["loc"] else None
            raise make_config_error(first["msg"], path, section) from e

    # Environment override for log level
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        try:
            level = LogLevel(env_level.upper())
        except ValueError as e:
            raise make_config_error(
                f"Unknown log level {env_level!r} in ${LOG_LEVEL_ENV_VAR}", path
            ) from e
        config = config.model_copy(update={"logging": LoggingConfig(level=level)})

    return config
