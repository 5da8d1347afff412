"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console handler and, optionally, a plain text file handler and a JSON
lines file handler.  Log format includes the timestamp, logger name,
log level and message.  This module ensures that logging is set up
exactly once.
"""

import json
import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _file_handler(logfile: str, formatter: logging.Formatter) -> logging.Handler:
    log_path = Path(logfile).resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    json_logfile: Optional[str] = None,
) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally file handlers.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to in the console format.
    json_logfile : Optional[str]
        Path to a file receiving one JSON object per log record.
        Missing parent directories are created.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by a test runner or a previous
        # ``create_app`` call.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        logger.addHandler(_file_handler(logfile, formatter))
    if json_logfile:
        logger.addHandler(_file_handler(json_logfile, JsonFormatter(datefmt=DATE_FORMAT)))
