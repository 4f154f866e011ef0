"""
Logging setup for clipstash.

setup_logging() configures the "clipstash" logger with a JSON-lines file
handler and a plain console handler. It is called once by the CLI entry point;
library modules only call logging.getLogger(__name__).
"""

from datetime import datetime
import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from .config import LoggingSettings, get_settings

LOGGER_NAME = "clipstash"
ARCHIVE_STAMP = "%Y%m%d_%H%M%S"


def build_config(settings: LoggingSettings) -> dict:
    """Return the dictConfig mapping for the given settings."""
    file_level = settings.log_level.upper()
    console_level = settings.console_log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "filename": str(settings.log_file),
                "formatter": "json",
                "level": file_level,
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": console_level,
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["file", "console"],
                "level": "DEBUG",
                "propagate": False,
            },
        },
    }


def _archives(log_file: Path) -> list[Path]:
    """Archived log files, newest first."""
    return sorted(
        log_file.parent.glob(f"{log_file.stem}_*{log_file.suffix}"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )


def archive_daily_log_file(log_file: Path, now: datetime | None = None) -> Path | None:
    """
    Rename log_file with a timestamp suffix unless an archive from the last 24
    hours already exists. Returns the archive path, or None if nothing was done.
    """
    now = now or datetime.now()
    archives = _archives(log_file)
    if archives:
        stamp = archives[0].stem.replace(f"{log_file.stem}_", "")
        try:
            latest = datetime.strptime(stamp, ARCHIVE_STAMP)
        except ValueError:
            latest = None
        if latest is not None and (now - latest).total_seconds() < 24 * 3600:
            return None
    if not log_file.exists():
        return None
    archive_path = log_file.with_name(
        f"{log_file.stem}_{now.strftime(ARCHIVE_STAMP)}{log_file.suffix}"
    )
    log_file.rename(archive_path)
    return archive_path


def prune_log_archives(log_file: Path, keep: int) -> list[Path]:
    """Delete all but the newest `keep` archives. Returns the deleted paths."""
    removed = _archives(log_file)[keep:]
    for archive_file in removed:
        archive_file.unlink()
    return removed


def setup_logging(settings: LoggingSettings | None = None) -> T_Logger:
    """Configure handlers for the clipstash logger and return it."""
    settings = settings or get_settings(LoggingSettings)
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    archived = archive_daily_log_file(settings.log_file)
    removed = prune_log_archives(settings.log_file, settings.archives_to_keep)

    dictConfig(build_config(settings))
    logger = logging.getLogger(LOGGER_NAME)
    system_logger = logger.getChild("SYSTEM")
    if archived:
        system_logger.debug("Archived previous log file to %s", archived)
    for archive_file in removed:
        system_logger.debug("Deleted old log archive %s", archive_file)
    system_logger.debug("Logger for %s initialized.", LOGGER_NAME)
    return logger
