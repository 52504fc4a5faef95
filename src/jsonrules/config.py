"""Configuration management for jsonrules using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".jsonrules.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class OutputFormat(str, Enum):
    """CLI output formats."""
    TABLE = "table"
    JSON = "json"


class ValidatorConfig(BaseModel):
    """Validator behaviour section."""
    default_name: str = Field(alias="defaultName", default="This value")
    path_separator: str = Field(alias="pathSeparator", default=".")

    @field_validator("default_name")
    @classmethod
    def validate_default_name(cls, v):
        if not v.strip():
            raise ValueError("default_name must not be blank")
        return v

    @field_validator("path_separator")
    @classmethod
    def validate_path_separator(cls, v):
        if not v:
            raise ValueError("path_separator must not be empty")
        if v == "*":
            raise ValueError("path_separator cannot be the wildcard key '*'")
        return v

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """CLI output section."""
    format: OutputFormat = OutputFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class JsonRulesConfig(BaseModel):
    """Complete jsonrules configuration model."""
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> JsonRulesConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .jsonrules.json

    Returns:
        JsonRulesConfig: Loaded and validated configuration

    Raises:
        ValueError: If the configuration file is not valid JSON or fails validation
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return JsonRulesConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except (ValidationError, TypeError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    return JsonRulesConfig()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .jsonrules.json in ``start_dir`` or one of its parents.

    Args:
        start_dir: Directory to start search from (default: current directory)
    """
    start = Path(start_dir or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILE_NAME for directory in (start, *start.parents))
    return next((candidate for candidate in candidates if candidate.is_file()), None)
