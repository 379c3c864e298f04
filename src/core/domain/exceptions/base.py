"""Base exception for Docshelf.

Errors come from three places: indexing the documentation tree (an
unreadable directory or file), configuration (a missing documentation root)
and caller input (a malformed access pointer). Query operations do not raise
them; a missing document or an empty listing is an ordinary return value.

An error remembers the frame that raised it, so a skipped file logged by the
tree indexer points at the loader and an API error body points at the parser.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import FrameType
from typing import Any


@dataclass(frozen=True)
class RaiseSite:
    """Where an error was raised."""

    class_name: str
    function: str
    file_name: str
    line: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def from_frame(cls, frame: FrameType | None) -> "RaiseSite":
        if frame is None:
            return cls("<unknown>", "<unknown>", "<unknown>", 0)
        if "self" in frame.f_locals:
            class_name = type(frame.f_locals["self"]).__name__
        elif isinstance(frame.f_locals.get("cls"), type):
            class_name = frame.f_locals["cls"].__name__
        else:
            class_name = "<module>"
        return cls(
            class_name=class_name,
            function=frame.f_code.co_name,
            file_name=frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1],
            line=frame.f_lineno,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.function,
            "file": self.file_name,
            "line": self.line,
            "timestamp": self.timestamp,
        }


class DocshelfError(Exception):
    """Base exception for indexing, configuration and input errors.

    Subclasses set ``error_code`` and may add keyword arguments for the
    value they are about (a path, a URI); those values are copied into the
    context so they show up in logs and API responses.

    Example:
        try:
            content = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError("Failed to load document", path=path, cause=e) from e
    """

    error_code: str = "DOC_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description.
            cause: Underlying exception, usually an ``OSError`` or ``ValueError``.
            context: Extra key-value pairs for logs and error responses.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = dict(context or {})
        self.location = RaiseSite.from_frame(self._raising_frame())
        self.stack_trace = "".join(traceback.format_exception(cause)) if cause else None

    def _raising_frame(self) -> FrameType | None:
        # Skip this method and every constructor frame bound to this error
        frame = inspect.currentframe()
        while frame is not None and frame.f_locals.get("self") is self:
            frame = frame.f_back
        return frame

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Structured form used by ``log_exception`` and the API error handler.

        Args:
            include_trace: Add the cause's formatted traceback (debug mode).
        """
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            result["context"] = dict(self.extra_context)
        if self.cause is not None:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        if include_trace and self.stack_trace:
            result["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]
        return result
