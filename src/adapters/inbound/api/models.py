"""Pydantic models for API responses."""

from pydantic import BaseModel, ConfigDict, Field


class TextResponse(BaseModel):
    """Rendered text for a single request."""

    uri: str | None = Field(
        None,
        description="Access pointer of the resource, when the response is a resource",
        json_schema_extra={"example": "docs://guides/setup/install"},
    )
    text: str = Field(..., description="Formatted text for the caller")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    documents: str = Field(..., description="Documentation index status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., DOC_VAL_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "InvalidResourceURIError", "code": "DOC_VAL_002", "message": "..."},
            "location": {"class": "<module>", "method": "parse", ...},
            "context": {"uri": "ftp://guides"},
            "stack_trace": ["Traceback...", ...]  # Only in debug mode
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    location: ErrorLocation | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
