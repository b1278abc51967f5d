"""Configuration management for slnpath using Pydantic models."""

import json
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from slnpath.constants import DIRECTORY_SEPARATORS

CONFIG_FILE_NAME = ".slnpath.json"


class PathFlavor(str, Enum):
    """Host path-resolution semantics."""
    POSIX = "posix"
    WINDOWS = "windows"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


def _host_flavor() -> PathFlavor:
    return PathFlavor.WINDOWS if os.name == "nt" else PathFlavor.POSIX


class PathConfig(BaseModel):
    """Path normalization section.

    The separator pair is fixed for a process: normalization rewrites
    separators to canonical_separator only when it differs from
    native_separator.
    """
    canonical_separator: str = Field(alias="canonicalSeparator", default="/")
    native_separator: str = Field(alias="nativeSeparator", default=os.sep)
    flavor: PathFlavor = Field(default_factory=_host_flavor)

    @field_validator("canonical_separator", "native_separator")
    @classmethod
    def validate_separator(cls, v):
        if v not in DIRECTORY_SEPARATORS:
            raise ValueError(f"separator must be one of {list(DIRECTORY_SEPARATORS)}, got: {v!r}")
        return v

    @property
    def rewrites_separators(self) -> bool:
        """Whether normalized paths get their separators rewritten."""
        return self.native_separator != self.canonical_separator

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    fail_on_invalid: bool = Field(alias="failOnInvalid", default=True)
    normalize_reported_paths: bool = Field(alias="normalizeReportedPaths", default=True)

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class SlnpathConfig(BaseModel):
    """Complete slnpath configuration model."""
    paths: PathConfig = Field(default_factory=PathConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


@lru_cache(maxsize=1)
def get_default_path_config() -> PathConfig:
    """Host defaults, built once per process."""
    return PathConfig()


def load_config(config_path: str | Path | None = None) -> SlnpathConfig:
    """Read the separator, validation and logging settings.

    A missing file is not an error: the host defaults apply. When no path is
    given, the nearest .slnpath.json above the working directory is used.

    Args:
        config_path: Explicit settings file

    Returns:
        SlnpathConfig: Parsed settings, or the defaults

    Raises:
        ValueError: If the settings file cannot be read, is not JSON, or
                    holds unknown sections or bad separator values
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.is_file():
        return create_default_config()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Settings file {path} could not be read: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Settings file {path} is not valid JSON: {e}") from e

    try:
        return SlnpathConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Settings file {path} was rejected: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the .slnpath.json closest to start_dir, walking up to the root."""
    start = Path(start_dir if start_dir is not None else Path.cwd()).resolve()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate

    return None


def create_default_config() -> SlnpathConfig:
    """Create default configuration using the host's separator conventions."""
    return SlnpathConfig()
