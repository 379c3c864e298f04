"""Use-case service: one method per external request type, returning rendered text."""

from __future__ import annotations

import logging

from ...core.domain.resource_uri import (
    ResourceKind,
    ResourceURI,
    category_uri,
    document_uri,
    subcategory_uri,
)
from ...core.services import text_renderer
from ...core.services.query_service import QueryService

logger = logging.getLogger(__name__)


class DocumentationService:
    """Application service turning query results into caller-facing text."""

    def __init__(self, queries: QueryService) -> None:
        self.queries = queries

    async def read_document(self, doc_id: str) -> str:
        document = await self.queries.get_by_id(doc_id)
        return text_renderer.render_document(doc_id, document)

    async def read_category(self, category: str) -> str:
        listing = await self.queries.list_by_category(category)
        return text_renderer.render_category(listing)

    async def read_subcategory(self, category: str, subcategory: str) -> str:
        previews = await self.queries.list_by_subcategory(category, subcategory)
        return text_renderer.render_subcategory(category, subcategory, previews)

    async def search_docs(self, query: str) -> str:
        results = await self.queries.search(query)
        return text_renderer.render_search(query, results)

    async def list_topics(self) -> str:
        summary = await self.queries.topics_summary()
        return text_renderer.render_topics(summary)

    async def list_categories(self) -> str:
        categories = await self.queries.list_categories()
        return text_renderer.render_categories(categories)

    async def compare_docs(self, topic1: str, topic2: str) -> str:
        comparison = await self.queries.compare(topic1, topic2)
        return text_renderer.render_comparison(comparison)

    async def read_resource(self, uri: str) -> tuple[str, str]:
        """Dereference an access pointer printed in rendered text.

        Args:
            uri: ``docs://<id>``, ``docs-category://<category>`` or
                ``docs-subcategory://<category>/<subcategory>``.

        Returns:
            Tuple of (normalized URI, rendered text).

        Raises:
            InvalidResourceURIError: If the URI cannot be parsed.
        """
        resource = ResourceURI.parse(uri)
        logger.debug(f"Reading resource {resource}")

        if resource.kind is ResourceKind.DOCUMENT:
            return document_uri(resource.path), await self.read_document(resource.path)
        if resource.kind is ResourceKind.CATEGORY:
            return category_uri(resource.path), await self.read_category(resource.path)

        category, subcategory = resource.parts
        return (
            subcategory_uri(category, subcategory),
            await self.read_subcategory(category, subcategory),
        )
