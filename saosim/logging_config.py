"""Opt-in logging setup for saosim.

saosim never configures logging on import: the package logger only carries
a NullHandler. Applications that want to see what the data layer and the
effect machinery report call one of the helpers below.

Example usage:
    import saosim

    # Human readable output on stderr
    saosim.enable_console_logging(level="DEBUG")

    # Size-capped log file
    saosim.enable_file_logging("runs/saosim.log", max_bytes=5_000_000)

    # One JSON object per line, for log shippers
    saosim.enable_json_logging()

    # Or drive everything from the environment
    saosim.configure_from_env()

Environment variables:
    SAOSIM_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SAOSIM_LOG_FILE: Path of a rotating log file
    SAOSIM_LOG_JSON: Set to "1" to emit JSON records
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "saosim"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Render a log record as a single-line JSON object.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "INFO",
         "logger": "saosim.data.behavior_data", "message": "Properties of 'drink' ..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    """Translate a level name to its numeric value; ints pass through."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every non-null handler on the saosim logger."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _install(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter):
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return handler


def _rotating_handler(path: str | Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send saosim log records to stderr.

    Args:
        level: Level name or numeric level.
        format: Format string for each record.
        date_format: strftime format used for %(asctime)s.

    Returns:
        The installed StreamHandler.
    """
    return _install(logging.StreamHandler(), level, logging.Formatter(format, date_format))


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Write saosim log records to a size-capped rotating file.

    Missing parent directories are created. Once the file reaches
    ``max_bytes`` it is rolled over, keeping ``backup_count`` old files.

    Returns:
        The installed RotatingFileHandler.
    """
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _install(handler, level, logging.Formatter(format, date_format))


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Send saosim log records to stderr as JSON lines."""
    return _install(logging.StreamHandler(), level, JsonFormatter())


def enable_json_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Write saosim log records as JSON lines to a rotating file."""
    handler = _rotating_handler(path, max_bytes, backup_count)
    return _install(handler, level, JsonFormatter())


def configure_from_env() -> None:
    """Install handlers according to the SAOSIM_* environment variables.

    Does nothing when neither SAOSIM_LOGGING nor SAOSIM_LOG_FILE is set.
    A log file without an explicit level logs at INFO.

    Example:
        $ export SAOSIM_LOGGING=DEBUG
        $ export SAOSIM_LOG_FILE=runs/saosim.log

        >>> import saosim
        >>> saosim.configure_from_env()
    """
    level = os.environ.get("SAOSIM_LOGGING", "").upper()
    log_file = os.environ.get("SAOSIM_LOG_FILE", "")
    use_json = os.environ.get("SAOSIM_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if log_file:
        if use_json:
            enable_json_file_logging(log_file, level=level)
        else:
            enable_file_logging(log_file, level=level)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Change the level of the saosim logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Change the level of one saosim submodule logger.

    Args:
        module: Dotted path relative to saosim, e.g. "data.behavior_data".
        level: Level name or numeric level.

    Example:
        >>> saosim.enable_console_logging(level="WARNING")
        >>> saosim.set_module_level("data.registry", "DEBUG")
    """
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove installed handlers and raise the level above CRITICAL.

    Records no longer propagate to handlers configured on the root logger.
    """
    _clear_handlers()
    logger = _get_logger()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
