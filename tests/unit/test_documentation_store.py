"""Unit tests for the lazily loaded documentation store."""

import asyncio
from datetime import UTC, datetime
from pathlib import Path

import pytest
from conftest import CountingSource

from src.core.domain import Document
from src.core.ports.document_source_port import DocumentSourcePort
from src.core.services.documentation_store import DocumentationStore, LoadState

pytestmark = pytest.mark.unit


def make_doc(doc_id: str, category: str, subcategory: str | None = None) -> Document:
    return Document(
        id=doc_id,
        title=doc_id,
        description="",
        content="",
        category=category,
        subcategory=subcategory,
        tags=(category,),
        updated_at=datetime(2024, 1, 1, tzinfo=UTC),
        path=Path(f"/docs/{doc_id}.md"),
    )


@pytest.fixture
def source():
    docs = [
        make_doc("guides/intro", "guides"),
        make_doc("guides/setup/install", "guides", "setup"),
        make_doc("api/rest/auth", "api", "rest"),
        make_doc("guides/setup/upgrade", "guides", "setup"),
        make_doc("guides/advanced/tuning", "guides", "advanced"),
    ]
    return CountingSource({doc.id: doc for doc in docs})


class TestEnsureLoaded:
    def test_starts_not_loaded(self, source):
        store = DocumentationStore(source)
        assert store.state is LoadState.NOT_LOADED
        assert not store.is_loaded
        assert source.calls == 0

    def test_walks_source_only_once(self, source):
        store = DocumentationStore(source)

        async def load_twice():
            first = await store.ensure_loaded()
            second = await store.ensure_loaded()
            return first, second

        first, second = asyncio.run(load_twice())

        assert source.calls == 1
        assert first is second
        assert store.is_loaded
        assert store.document_count == 5

    def test_concurrent_first_calls_share_one_walk(self, source):
        store = DocumentationStore(source)

        async def load_concurrently():
            return await asyncio.gather(*(store.ensure_loaded() for _ in range(10)))

        results = asyncio.run(load_concurrently())

        assert source.calls == 1
        assert all(result is results[0] for result in results)

    def test_mapping_is_read_only(self, source):
        store = DocumentationStore(source)
        documents = asyncio.run(store.ensure_loaded())

        with pytest.raises(TypeError):
            documents["new"] = make_doc("new", "x")

    def test_source_failure_leaves_empty_loaded_store(self):
        class BrokenSource(DocumentSourcePort):
            calls = 0

            async def load_collection(self):
                self.calls += 1
                raise RuntimeError("disk on fire")

        source = BrokenSource()
        store = DocumentationStore(source)

        documents = asyncio.run(store.ensure_loaded())
        again = asyncio.run(store.ensure_loaded())

        assert dict(documents) == {}
        assert store.is_loaded
        assert again is documents
        assert source.calls == 1

    def test_preload_returns_document_count(self, source):
        store = DocumentationStore(source)
        assert asyncio.run(store.preload()) == 5
        assert asyncio.run(store.preload()) == 5
        assert source.calls == 1


class TestEnumeration:
    def test_categories_in_first_encountered_order(self, source):
        store = DocumentationStore(source)
        assert asyncio.run(store.list_categories()) == ["guides", "api"]

    def test_subcategories_in_first_encountered_order(self, source):
        store = DocumentationStore(source)
        assert asyncio.run(store.list_subcategories("guides")) == ["setup", "advanced"]

    def test_subcategories_of_unknown_category(self, source):
        store = DocumentationStore(source)
        assert asyncio.run(store.list_subcategories("nope")) == []

    def test_enumeration_triggers_load(self, source):
        store = DocumentationStore(source)
        asyncio.run(store.list_categories())
        assert store.is_loaded
        assert source.calls == 1

    def test_filesystem_backed_store(self, store):
        assert asyncio.run(store.list_categories()) in (["catA", "catB"], ["catB", "catA"])
        assert set(asyncio.run(store.list_subcategories("catA"))) == {"sub1", "sub2"}
        assert asyncio.run(store.list_subcategories("catB")) == []
