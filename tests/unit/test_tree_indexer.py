"""Unit tests for the filesystem tree indexer."""

import asyncio
import logging
from pathlib import Path

import pytest
from conftest import write_doc

from src.adapters.outbound.filesystem.tree_indexer import (
    FilesystemDocumentSource,
    TreeIndexer,
    is_document_file,
)

pytestmark = pytest.mark.unit


class TestIsDocumentFile:
    @pytest.mark.parametrize("name", ["a.md", "b.mdx", "c.v1.md"])
    def test_recognized_extensions(self, name):
        assert is_document_file(Path(name))

    @pytest.mark.parametrize("name", ["a.txt", "b.markdown", "md", "c.md.bak"])
    def test_other_files_ignored(self, name):
        assert not is_document_file(Path(name))


class TestTreeIndexer:
    def test_indexes_categories_and_subcategories(self, docs_root):
        documents = TreeIndexer(docs_root).index()

        assert set(documents) == {
            "catA/overview",
            "catA/sub1/doc-one",
            "catA/sub2/deep",
            "catB/notes",
        }
        assert documents["catA/overview"].subcategory is None
        assert documents["catA/sub1/doc-one"].subcategory == "sub1"

    def test_subcategory_fixed_at_first_level(self, docs_root):
        deep = TreeIndexer(docs_root).index()["catA/sub2/deep"]

        assert deep.subcategory == "sub2"
        assert deep.path == docs_root / "catA" / "sub2" / "nested" / "deep.mdx"

    def test_files_at_root_and_other_extensions_ignored(self, docs_root):
        documents = TreeIndexer(docs_root).index()

        assert not any(doc_id.endswith("stray") for doc_id in documents)
        assert not any(doc_id.endswith("readme") for doc_id in documents)

    def test_tags_contain_structural_labels(self, docs_root):
        for doc in TreeIndexer(docs_root).index().values():
            assert doc.category in doc.tags
            if doc.subcategory:
                assert doc.subcategory in doc.tags
            assert doc.path.stem in doc.tags

    def test_index_by_category(self, docs_root):
        by_category = TreeIndexer(docs_root).index_by_category()

        assert set(by_category) == {"catA", "catB"}
        assert len(by_category["catA"]) == 3
        assert [doc.id for doc in by_category["catB"]] == ["catB/notes"]

    def test_empty_category_is_listed_with_no_documents(self, tmp_path):
        (tmp_path / "empty").mkdir()
        assert TreeIndexer(tmp_path).index_by_category() == {"empty": []}

    def test_missing_root_yields_empty_result(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            documents = TreeIndexer(tmp_path / "missing").index()

        assert documents == {}
        assert "DirectoryReadError" in caplog.text

    def test_root_that_is_a_file_yields_empty_result(self, tmp_path):
        root = write_doc(tmp_path, "not-a-dir.md", "# Nope")
        assert TreeIndexer(root).index() == {}

    def test_unreadable_branch_is_skipped(self, docs_root, monkeypatch):
        broken = docs_root / "catA" / "sub1"
        original_iterdir = Path.iterdir

        def failing_iterdir(self):
            if self == broken:
                raise PermissionError(13, "Permission denied", str(self))
            return original_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", failing_iterdir)

        documents = TreeIndexer(docs_root).index()

        assert "catA/sub1/doc-one" not in documents
        assert "catA/overview" in documents
        assert "catA/sub2/deep" in documents
        assert "catB/notes" in documents

    def test_unreadable_file_is_skipped(self, docs_root, caplog):
        bad = docs_root / "catB" / "broken.md"
        bad.write_bytes(b"\xff\xfe\xfa")

        with caplog.at_level(logging.WARNING):
            documents = TreeIndexer(docs_root).index()

        assert "catB/broken" not in documents
        assert "catB/notes" in documents
        assert "DocumentLoadError" in caplog.text

    def test_identifier_collision_last_loaded_wins(self, tmp_path):
        # doc.md and doc.mdx share the identifier "catA/doc"; which one is
        # visited last depends on filesystem enumeration order.
        write_doc(tmp_path, "catA/doc.md", "# From Markdown")
        write_doc(tmp_path, "catA/doc.mdx", "# From MDX")
        indexer = TreeIndexer(tmp_path)

        traversal = indexer.index_category(tmp_path / "catA", "catA")
        documents = indexer.index()

        assert [doc.id for doc in traversal] == ["catA/doc", "catA/doc"]
        assert len(documents) == 1
        assert documents["catA/doc"].title == traversal[-1].title

    def test_nested_collision_within_subcategory(self, tmp_path):
        write_doc(tmp_path, "catA/sub/page.md", "# Shallow")
        write_doc(tmp_path, "catA/sub/deeper/page.md", "# Deep")
        indexer = TreeIndexer(tmp_path)

        traversal = indexer.index_category(tmp_path / "catA", "catA")
        documents = indexer.index()

        assert list(documents) == ["catA/sub/page"]
        assert documents["catA/sub/page"].title == traversal[-1].title

    def test_logs_category_counts(self, docs_root, caplog):
        with caplog.at_level(logging.INFO):
            TreeIndexer(docs_root).index()

        assert 'Indexed 3 documents for category "catA"' in caplog.text
        assert 'Indexed 1 documents for category "catB"' in caplog.text


class TestFilesystemDocumentSource:
    def test_load_collection_runs_indexer(self, docs_root):
        source = FilesystemDocumentSource(docs_root)

        documents = asyncio.run(source.load_collection())

        assert source.root == docs_root
        assert "catA/sub1/doc-one" in documents
