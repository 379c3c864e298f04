"""Read-only queries over the documentation store."""

import logging
from collections.abc import Iterable

from ..domain import (
    CategoryListing,
    CategorySummary,
    Comparison,
    Document,
    DocumentPreview,
    TopicsSummary,
)
from .documentation_store import DocumentationStore

logger = logging.getLogger(__name__)


def search_text(document: Document, include_tags: bool = True) -> str:
    """Lower-cased haystack used for substring matching."""
    parts = [document.title, document.description or "", document.content]
    if include_tags:
        parts.append(" ".join(document.tags))
    return " ".join(parts).lower()


def matches(document: Document, query: str, include_tags: bool = True) -> bool:
    """Case-insensitive substring test against a document's text."""
    return query.lower() in search_text(document, include_tags=include_tags)


class QueryService:
    """Lookup, listing, search and comparison over the indexed documents.

    None of the operations raise for a missing document or an empty
    result; absence is expressed through ``None`` or empty collections.
    Search is plain substring containment without any ranking, and results
    keep the order documents were indexed in.
    """

    def __init__(self, store: DocumentationStore) -> None:
        """Initialize the query service.

        Args:
            store: Store holding the indexed documents.
        """
        self.store = store

    async def get_by_id(self, doc_id: str) -> Document | None:
        """Exact identifier lookup."""
        documents = await self.store.ensure_loaded()
        return documents.get(doc_id)

    async def list_categories(self) -> list[str]:
        return await self.store.list_categories()

    async def list_subcategories(self, category: str) -> list[str]:
        return await self.store.list_subcategories(category)

    async def list_by_category(self, category: str) -> CategoryListing:
        """All documents of a category, grouped by subcategory.

        Documents without a subcategory go to the root bucket. Subcategory
        buckets follow the order of :meth:`list_subcategories`.
        """
        documents = await self.store.ensure_loaded()
        subcategories = await self.store.list_subcategories(category)
        previews = _previews(doc for doc in documents.values() if doc.category == category)

        return CategoryListing(
            category=category,
            subcategories=subcategories,
            root=[p for p in previews if not p.subcategory],
            by_subcategory={
                subcat: [p for p in previews if p.subcategory == subcat]
                for subcat in subcategories
            },
        )

    async def list_by_subcategory(self, category: str, subcategory: str) -> list[DocumentPreview]:
        """Documents matching both category and subcategory exactly."""
        documents = await self.store.ensure_loaded()
        return _previews(
            doc
            for doc in documents.values()
            if doc.category == category and doc.subcategory == subcategory
        )

    async def search(self, query: str) -> list[DocumentPreview]:
        """Documents whose title, description, content or tags contain ``query``.

        Args:
            query: Free text, matched case-insensitively as a substring.

        Returns:
            Matching documents in index order.
        """
        documents = await self.store.ensure_loaded()
        results = _previews(doc for doc in documents.values() if matches(doc, query))
        logger.debug(f'Search for "{query}" matched {len(results)} documents')
        return results

    async def find_doc(self, topic: str) -> Document | None:
        """Resolve a topic to a document.

        An exact identifier wins outright. Otherwise the first document whose
        title, description or content contains the topic is returned; tags
        are not considered here.
        """
        documents = await self.store.ensure_loaded()
        if topic in documents:
            return documents[topic]
        return next(
            (doc for doc in documents.values() if matches(doc, topic, include_tags=False)),
            None,
        )

    async def compare(self, topic1: str, topic2: str) -> Comparison:
        """Resolve two topics independently and collect their shared tags."""
        first = await self.find_doc(topic1)
        second = await self.find_doc(topic2)

        common_tags: list[str] = []
        if first and second:
            common_tags = [tag for tag in first.tags if tag in second.tags]

        return Comparison(
            topic1=topic1,
            topic2=topic2,
            first=first,
            second=second,
            common_tags=common_tags,
        )

    async def topics_summary(self) -> TopicsSummary:
        """Document count and subcategories for every category."""
        documents = await self.store.ensure_loaded()
        summaries = []
        for category in await self.store.list_categories():
            summaries.append(
                CategorySummary(
                    category=category,
                    count=sum(1 for doc in documents.values() if doc.category == category),
                    subcategories=await self.store.list_subcategories(category),
                )
            )
        return TopicsSummary(total=len(documents), categories=summaries)


def _previews(documents: Iterable[Document]) -> list[DocumentPreview]:
    return [DocumentPreview.from_document(doc) for doc in documents]
