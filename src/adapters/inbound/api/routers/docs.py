"""Documentation read, search and compare endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from .....application.services.documentation_service import DocumentationService
from .....core.domain.resource_uri import category_uri, document_uri, subcategory_uri
from ..deps import documentation_service
from ..models import ErrorResponse, TextResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["docs"])


@router.get("/documents/{doc_id:path}", response_model=TextResponse)
async def read_document(
    doc_id: str,
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    """Full document by identifier, e.g. ``guides/setup/install``."""
    return TextResponse(uri=document_uri(doc_id), text=await service.read_document(doc_id))


@router.get("/categories", response_model=TextResponse)
async def list_categories(
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    return TextResponse(text=await service.list_categories())


@router.get("/categories/{category}", response_model=TextResponse)
async def read_category(
    category: str,
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    """Category overview grouped by subcategory."""
    return TextResponse(uri=category_uri(category), text=await service.read_category(category))


@router.get("/categories/{category}/{subcategory}", response_model=TextResponse)
async def read_subcategory(
    category: str,
    subcategory: str,
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    return TextResponse(
        uri=subcategory_uri(category, subcategory),
        text=await service.read_subcategory(category, subcategory),
    )


@router.get("/search", response_model=TextResponse)
async def search_docs(
    query: str = Query(..., min_length=1, max_length=1000, description="Text to search for"),
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    """Case-insensitive substring search over titles, descriptions, content and tags."""
    logger.info(f'Search request: "{query}"')
    return TextResponse(text=await service.search_docs(query))


@router.get("/topics", response_model=TextResponse)
async def list_topics(
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    return TextResponse(text=await service.list_topics())


@router.get("/compare", response_model=TextResponse)
async def compare_docs(
    topic1: str = Query(..., min_length=1, description="First topic ID or keyword"),
    topic2: str = Query(..., min_length=1, description="Second topic ID or keyword"),
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    return TextResponse(text=await service.compare_docs(topic1, topic2))


@router.get(
    "/resources",
    response_model=TextResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid resource URI"}},
)
async def read_resource(
    uri: str = Query(..., description="docs://, docs-category:// or docs-subcategory:// pointer"),
    service: DocumentationService = Depends(documentation_service),
) -> TextResponse:
    """Dereference an access pointer printed in another response."""
    normalized, text = await service.read_resource(uri)
    return TextResponse(uri=normalized, text=text)
