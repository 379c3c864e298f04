"""Configuration exceptions for Docshelf."""

from pathlib import Path
from typing import Any

from .base import DocshelfError


class ConfigurationError(DocshelfError):
    """Settings are missing or point at something unusable."""

    error_code = "DOC_CFG_001"


class DocsRootNotFoundError(ConfigurationError):
    """Configured documentation root does not exist or is not a directory."""

    error_code = "DOC_CFG_002"

    def __init__(
        self,
        message: str,
        *,
        docs_root: Path | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if docs_root is not None:
            context["docs_root"] = str(docs_root)
        super().__init__(message, context=context)
        self.docs_root = docs_root
