"""Validation exceptions for Docshelf."""

from typing import Any

from .base import DocshelfError


class ValidationError(DocshelfError):
    """Caller input was rejected."""

    error_code = "DOC_VAL_001"


class InvalidResourceURIError(ValidationError):
    """Access pointer has an unknown scheme or is missing parts."""

    error_code = "DOC_VAL_002"

    def __init__(
        self,
        message: str,
        *,
        uri: str | None = None,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if uri is not None:
            context["uri"] = uri
        super().__init__(message, cause=cause, context=context)
        self.uri = uri
