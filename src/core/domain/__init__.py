"""Domain models for Docshelf.

- document: Document, DocumentMetadata and the listing/summary views
  returned by the query service

All models are re-exported here for convenient importing:

    from src.core.domain import Document, DocumentPreview
"""

from .document import (
    PREVIEW_LENGTH,
    UNTITLED_DOCUMENT,
    CategoryListing,
    CategorySummary,
    Comparison,
    Document,
    DocumentMetadata,
    DocumentPreview,
    TopicsSummary,
    make_preview,
)

__all__ = [
    "PREVIEW_LENGTH",
    "UNTITLED_DOCUMENT",
    "Document",
    "DocumentMetadata",
    "DocumentPreview",
    "CategoryListing",
    "CategorySummary",
    "TopicsSummary",
    "Comparison",
    "make_preview",
]
