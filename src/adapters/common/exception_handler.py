"""Structured error output shared by the tree indexer, the API and the CLI."""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import (
    ConfigurationError,
    DocshelfError,
    IndexingError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First matching class wins, so subclasses come before their bases
HTTP_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (IndexingError, 503),
    (ConfigurationError, 500),
    (DocshelfError, 500),
    (ValueError, 400),
    ((ConnectionError, TimeoutError), 503),
)


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe an exception with the same keys as ``DocshelfError.to_dict``.

    Exceptions from outside the hierarchy get the code ``PYTHON_ERR`` and the
    location of the innermost traceback frame.
    """
    if isinstance(exc, DocshelfError):
        result = exc.to_dict(include_trace=include_trace)
    else:
        frames = traceback.extract_tb(exc.__traceback__)
        last = frames[-1] if frames else None
        result = {
            "error": {"type": type(exc).__name__, "code": "PYTHON_ERR", "message": str(exc)},
            "location": {
                "class": "<unknown>",
                "method": last.name if last else "<unknown>",
                "file": _file_name(last.filename) if last else "<unknown>",
                "line": last.lineno if last else 0,
            },
        }
        if include_trace:
            result["stack_trace"] = _trace_lines(exc)

    if extra_context:
        result.setdefault("context", {}).update(extra_context)
    return result


def _file_name(path: str) -> str:
    return path.replace("\\", "/").rsplit("/", 1)[-1]


def _trace_lines(exc: Exception) -> list[str]:
    return [line for line in "".join(traceback.format_exception(exc)).splitlines() if line.strip()]


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log an exception as one JSON document, traceback included.

    The tree indexer logs skipped files and directories at WARNING through
    this; the API logs errors it turns into responses.
    """
    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(payload, indent=2, default=str))


def get_http_status_code(exc: Exception) -> int:
    """HTTP status for an exception escaping an API route; 500 when nothing matches."""
    for error_type, status in HTTP_STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500
