"""Process-wide documentation cache with one-time lazy loading."""

import asyncio
import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from ..domain import Document
from ..ports.document_source_port import DocumentSourcePort

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """Initialization state of the documentation store."""

    NOT_LOADED = "not_loaded"
    LOADING = "loading"
    LOADED = "loaded"


class DocumentationStore:
    """Owns the ``id -> Document`` mapping for the lifetime of the process.

    The first call to :meth:`ensure_loaded` indexes the document source;
    every later call returns the same read-only mapping. Concurrent first
    callers wait on a single lock, so the source is walked at most once.
    """

    def __init__(self, source: DocumentSourcePort) -> None:
        """Initialize the store.

        Args:
            source: Where documents are loaded from on first access.
        """
        self.source = source
        self.state = LoadState.NOT_LOADED
        self._documents: Mapping[str, Document] = MappingProxyType({})
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    @property
    def document_count(self) -> int:
        return len(self._documents)

    async def ensure_loaded(self) -> Mapping[str, Document]:
        """Load the collection on first use and return the cached mapping.

        Returns:
            Read-only mapping of identifier to Document, in load order.
        """
        if self.state is LoadState.LOADED:
            return self._documents

        async with self._lock:
            if self.state is LoadState.LOADED:
                return self._documents

            self.state = LoadState.LOADING
            try:
                documents = await self.source.load_collection()
            except Exception:
                logger.exception("Error loading documentations")
                documents = {}

            self._documents = MappingProxyType(dict(documents))
            self.state = LoadState.LOADED
            logger.info(f"Loaded {len(self._documents)} documentation entries")
            return self._documents

    async def preload(self) -> int:
        """Warm the cache ahead of the first query.

        Returns:
            Number of documents available.
        """
        documents = await self.ensure_loaded()
        return len(documents)

    async def list_categories(self) -> list[str]:
        """Distinct categories in first-encountered order."""
        documents = await self.ensure_loaded()
        return list(dict.fromkeys(doc.category for doc in documents.values()))

    async def list_subcategories(self, category: str) -> list[str]:
        """Distinct non-empty subcategories of a category in first-encountered order."""
        documents = await self.ensure_loaded()
        return list(
            dict.fromkeys(
                doc.subcategory
                for doc in documents.values()
                if doc.category == category and doc.subcategory
            )
        )
