"""Indexing exceptions for Docshelf.

These never escape an indexing pass: the tree indexer logs them and skips
the affected file or branch.
"""

from pathlib import Path
from typing import Any

from .base import DocshelfError


class IndexingError(DocshelfError):
    """Error while building the documentation index.

    Attributes:
        path: File or directory that could not be read, when known.
    """

    error_code = "DOC_IDX_001"

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, cause=cause, context=context)
        self.path = path


class DocumentLoadError(IndexingError):
    """A single document file could not be read or decoded."""

    error_code = "DOC_IDX_002"


class DirectoryReadError(IndexingError):
    """A directory of the documentation tree could not be listed."""

    error_code = "DOC_IDX_003"
