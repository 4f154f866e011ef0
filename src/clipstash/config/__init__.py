"""
clipstash.config
Configuration and settings management for clipstash.
Overview:
- Provides Pydantic settings classes for the store file and for logging.
- Each settings class inherits from FactoryBaseSettings and supports environment
    variable overrides via Field aliases, plus config.yaml / .env files in the
    application root (see clipstash.config.factory).
Contents:
- StoreSettings:
    Location of the canonical store file and the default history name.
- LoggingSettings:
    Log levels for the JSON log file and the console, the log directory, and how
    many archived log files to keep.
- get_settings:
    Cached factory for settings instances (re-exported).
Design Notes:
- Defaults allow zero-configuration use: the store lives in ./clipboard.json.
- Path fields accept strings or Path objects and expand "~".
"""

from pathlib import Path

from pydantic import Field, field_validator

from clipstash.config.base import APP_ENV, APP_ROOT  # noqa: F401
from clipstash.config.factory import FactoryBaseSettings
from clipstash.config.factory import get_settings  # noqa: F401  This is used externally

LOG_LEVELS = {"critical", "error", "warning", "info", "debug"}


class StoreSettings(FactoryBaseSettings):
    """
    Clipboard store settings.
    """

    store_path: Path = Field(
        default=Path("clipboard.json"),
        alias="CLIPSTASH_STORE_PATH",
        description="Path of the JSON file holding every saved history.",
    )
    default_history: str = Field(
        default="default",
        alias="CLIPSTASH_DEFAULT_HISTORY",
        description="History selected when the session starts.",
    )

    @field_validator("store_path", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("default_history")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_history cannot be empty")
        return v


class LoggingSettings(FactoryBaseSettings):
    """
    Logging configuration settings.
    """

    log_level: str = Field(
        default="info",
        alias="CLIPSTASH_LOG_LEVEL",
        description="Log level for the JSON log file.",
    )
    console_log_level: str = Field(
        default="warning",
        alias="CLIPSTASH_CONSOLE_LOG_LEVEL",
        description="Log level for messages echoed to the terminal.",
    )
    log_dir: Path = Field(
        default=APP_ROOT / "logs",
        alias="CLIPSTASH_LOG_DIR",
        description="Directory for clipstash.jsonl and its archives.",
    )
    archives_to_keep: int = Field(
        default=10,
        ge=0,
        alias="CLIPSTASH_LOG_ARCHIVES",
        description="Number of archived daily log files to keep.",
    )

    @field_validator("log_level", "console_log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level {v!r}; expected one of {sorted(LOG_LEVELS)}"
            )
        return level

    @field_validator("log_dir", mode="after")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @property
    def log_file(self) -> Path:
        """Path of the active JSON-lines log file."""
        return self.log_dir / "clipstash.jsonl"


__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "StoreSettings",
    "LoggingSettings",
    "get_settings",
]
