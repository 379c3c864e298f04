"""Composition root wiring the filesystem source to the query services."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from ..adapters.outbound.filesystem.tree_indexer import FilesystemDocumentSource
from ..application.services.documentation_service import DocumentationService
from ..config.settings import settings
from ..core.domain.exceptions import DocsRootNotFoundError
from ..core.services.documentation_store import DocumentationStore
from ..core.services.query_service import QueryService

logger = logging.getLogger(__name__)


def validate_docs_root(docs_root: Path) -> Path:
    """Check that the documentation root is an existing directory.

    Raises:
        DocsRootNotFoundError: If it does not exist or is not a directory.
    """
    if not docs_root.is_dir():
        raise DocsRootNotFoundError(
            f"Documentation root not found: {docs_root}",
            docs_root=docs_root,
            context={"env_var": "DOCSHELF_DOCS_ROOT"},
        )
    return docs_root


@lru_cache
def get_store() -> DocumentationStore:
    logger.info(f"Initializing DocumentationStore for {settings.docs_root} (composition root)...")
    return DocumentationStore(FilesystemDocumentSource(settings.docs_root))


@lru_cache
def get_query_service() -> QueryService:
    return QueryService(get_store())


@lru_cache
def get_documentation_service() -> DocumentationService:
    logger.info("Initializing DocumentationService...")
    return DocumentationService(get_query_service())
