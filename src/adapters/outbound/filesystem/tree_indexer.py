"""Filesystem document source: walks a documentation tree into Documents."""

import asyncio
import logging
from pathlib import Path

from ....core.domain import Document
from ....core.domain.exceptions import DirectoryReadError, DocumentLoadError
from ....core.ports.document_source_port import DocumentSourcePort
from ...common.exception_handler import log_exception
from .document_loader import load_document

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = (".md", ".mdx")

# Number of document ids logged after an indexing pass
SAMPLE_ID_COUNT = 5


def is_document_file(path: Path) -> bool:
    """Check whether a path names a documentation file by its extension."""
    return path.name.endswith(DOCUMENT_EXTENSIONS)


class TreeIndexer:
    """Indexes a ``root/<category>/[<subcategory>/...]`` documentation tree.

    Each immediate subdirectory of the root is a category. The first
    directory level below a category is the subcategory for every file
    beneath it, however deeply nested. Entries are visited in filesystem
    enumeration order, which decides which document wins when two files
    map to the same identifier.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the indexer.

        Args:
            root: Documentation root directory.
        """
        self.root = Path(root)

    def index(self) -> dict[str, Document]:
        """Walk the whole tree and return the flat ``id -> Document`` mapping.

        Later documents overwrite earlier ones with the same identifier.
        """
        documents: dict[str, Document] = {}
        for category_docs in self.index_by_category().values():
            for doc in category_docs:
                documents[doc.id] = doc

        sample_ids = list(documents)[:SAMPLE_ID_COUNT]
        logger.info(f"Loaded {len(documents)} documentation entries from {self.root}")
        if sample_ids:
            logger.info(f"Sample document IDs: {', '.join(sample_ids)}")
        return documents

    def index_by_category(self) -> dict[str, list[Document]]:
        """Load every category of the tree.

        An unreadable root yields an empty result. Unreadable branches and
        files are logged and skipped.

        Returns:
            Mapping of category name to its documents in traversal order.
        """
        try:
            entries = list(self.root.iterdir())
        except OSError as e:
            log_exception(
                DirectoryReadError(
                    "Error loading documentation collection",
                    path=self.root,
                    cause=e,
                )
            )
            return {}

        by_category: dict[str, list[Document]] = {}
        for entry in entries:
            if not entry.is_dir():
                continue
            by_category[entry.name] = self.index_category(entry, entry.name)
            logger.info(
                f'Indexed {len(by_category[entry.name])} documents for category "{entry.name}"'
            )
        return by_category

    def index_category(self, category_path: Path, category: str) -> list[Document]:
        """Load every document below a category directory.

        Args:
            category_path: Directory of the category.
            category: Category name.

        Returns:
            Documents in traversal order.
        """
        return self._walk(category_path, category, None)

    def _walk(self, directory: Path, category: str, subcategory: str | None) -> list[Document]:
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            log_exception(
                DirectoryReadError(
                    f"Error indexing documents in {directory}",
                    path=directory,
                    cause=e,
                    context={"category": category},
                ),
                level=logging.WARNING,
            )
            return []

        docs: list[Document] = []
        for entry in entries:
            if entry.is_dir():
                # Subcategory is fixed at the first level below the category
                docs.extend(self._walk(entry, category, subcategory or entry.name))
            elif entry.is_file() and is_document_file(entry):
                try:
                    docs.append(load_document(entry, category, subcategory))
                except DocumentLoadError as e:
                    log_exception(e, level=logging.WARNING)
        return docs


class FilesystemDocumentSource(DocumentSourcePort):
    """Document source backed by a directory tree on local disk."""

    def __init__(self, root: Path) -> None:
        self.indexer = TreeIndexer(root)

    @property
    def root(self) -> Path:
        return self.indexer.root

    async def load_collection(self) -> dict[str, Document]:
        """Index the tree in a worker thread so the event loop stays free."""
        logger.info(f"Loading documentation from {self.root}...")
        return await asyncio.to_thread(self.indexer.index)
