"""
Logging setup for speedlearn.

Every module logs through ``logging.getLogger(__name__)``, so all records
land under the ``speedlearn`` namespace. setup_logging() attaches handlers
to that namespace only and leaves uvicorn's own loggers alone.

Structured fields travel as ``extra={"extra_data": {...}}``: the JSON
formatter merges them into the entry, the console formatter appends them
as key=value pairs.
"""

import json
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER_NAME = "speedlearn"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


def _extra_data(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log files and collectors."""

    def __init__(self, service: str = LOGGER_NAME) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(_extra_data(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Single-line console output, level tag colored when writing to a TTY."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if self.use_colors:
            tag = f"{self.LEVEL_COLORS.get(record.levelno, '')}{tag}{self.RESET}"

        line = f"{tag} {record.name} - {record.getMessage()}"

        fields = _extra_data(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console_logging: bool = True,
) -> logging.Logger:
    """
    Configure the ``speedlearn`` logger.

    Safe to call more than once; handlers from a previous call are replaced.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Rotating JSON log file; no file logging when None.
        enable_console_logging: Log to stderr with ConsoleFormatter.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if enable_console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            ConsoleFormatter(use_colors=console_handler.stream.isatty())
        )
        package_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    return package_logger
