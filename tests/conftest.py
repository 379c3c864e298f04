"""
Pytest configuration and shared fixtures.
"""

import asyncio
import logging
from pathlib import Path

import pytest

from src.adapters.outbound.filesystem.tree_indexer import FilesystemDocumentSource
from src.config.logging import ROOT_LOGGER_NAME
from src.core.domain import Document
from src.core.ports.document_source_port import DocumentSourcePort
from src.core.services.documentation_store import DocumentationStore
from src.core.services.query_service import QueryService


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP app and CLI)")


def write_doc(root: Path, relative: str, text: str) -> Path:
    """Write a file below ``root``, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class CountingSource(DocumentSourcePort):
    """Document source that records how often it was asked to load."""

    def __init__(self, documents: dict[str, Document] | None = None) -> None:
        self.documents = documents or {}
        self.calls = 0

    async def load_collection(self) -> dict[str, Document]:
        self.calls += 1
        # Yield to the loop so concurrent callers can interleave
        await asyncio.sleep(0)
        return dict(self.documents)


@pytest.fixture
def docs_root(tmp_path):
    """A small documentation tree.

    docs/
      catA/overview.md
      catA/sub1/doc-one.md
      catA/sub2/nested/deep.mdx
      catB/notes.md
      catB/readme.txt        (ignored, wrong extension)
      stray.md               (ignored, not inside a category)
    """
    root = tmp_path / "docs"
    write_doc(root, "catA/overview.md", "# Overview\n\nTop level notes about installation.")
    write_doc(
        root,
        "catA/sub1/doc-one.md",
        "# Doc One [A sample]\n\nFirst line of the guide.\nSecond line.",
    )
    write_doc(root, "catA/sub2/nested/deep.mdx", "# Deep Dive Guide [Nested]\nDetails.")
    write_doc(root, "catB/notes.md", "No heading here, just text about installation.")
    write_doc(root, "catB/readme.txt", "# Not a document")
    write_doc(root, "stray.md", "# Stray")
    return root


@pytest.fixture
def store(docs_root):
    return DocumentationStore(FilesystemDocumentSource(docs_root))


@pytest.fixture
def query_service(store):
    return QueryService(store)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler and level changes made by setup_logging."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def configured_docs(docs_root, monkeypatch):
    """Point the process-wide settings at ``docs_root`` with fresh services."""
    from src.composition import container
    from src.config.settings import settings

    monkeypatch.setattr(settings, "docs_root", docs_root)
    monkeypatch.setattr(settings, "debug", False)
    for factory in (
        container.get_store,
        container.get_query_service,
        container.get_documentation_service,
    ):
        factory.cache_clear()
    yield docs_root
    for factory in (
        container.get_store,
        container.get_query_service,
        container.get_documentation_service,
    ):
        factory.cache_clear()
