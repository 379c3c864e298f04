"""Logging setup for the API server and the CLI.

Every module logs through ``logging.getLogger(__name__)``, so configuring
the ``src`` package logger here covers the indexer, the store and both
adapters.
"""

import json
import logging
import sys
from pathlib import Path

from ..core.domain.exceptions import DocshelfError

ROOT_LOGGER_NAME = "src"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record.

    Records logged with ``exc_info`` carry the exception type, message and
    traceback; a DocshelfError also contributes its error code and context,
    so a skipped document shows up with its path and category.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            details = {
                "type": type(exc).__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }
            if isinstance(exc, DocshelfError):
                details["code"] = exc.error_code
                details["context"] = exc.extra_context
            entry["exception"] = details

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the package logger, replacing handlers from an earlier call.

    Args:
        level: Level name; unknown names fall back to INFO.
        log_file: Also write records here, creating parent directories.
        json_format: Emit ``JSONExceptionFormatter`` output instead of text.

    Returns:
        The ``src`` package logger.
    """
    formatter: logging.Formatter = (
        JSONExceptionFormatter() if json_format else logging.Formatter(TEXT_FORMAT, DATE_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger
