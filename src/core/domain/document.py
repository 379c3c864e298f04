"""Document and listing models for the documentation index."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

UNTITLED_DOCUMENT = "Untitled Document"
PREVIEW_LENGTH = 100


@dataclass(frozen=True)
class DocumentMetadata:
    """Title and short description extracted from a document heading."""

    title: str = UNTITLED_DOCUMENT
    description: str = ""


@dataclass(frozen=True)
class Document:
    """A single indexed documentation file.

    Documents are immutable once loaded. The identifier joins the category,
    the optional subcategory and the file name without its extension.

    Attributes:
        id: Hierarchical identifier, e.g. ``guides/setup/install``.
        title: Title from the first ``#`` heading.
        description: Bracketed description from the heading, or "".
        content: Full raw text of the file.
        category: Top-level directory the file was found under.
        subcategory: First directory level below the category, if any.
        tags: Ordered, deduplicated labels used by search and compare.
        updated_at: Last modification time of the source file.
        path: Location of the source file.
    """

    id: str
    title: str
    description: str
    content: str
    category: str
    subcategory: str | None
    tags: tuple[str, ...]
    updated_at: datetime
    path: Path

    @property
    def preview(self) -> str:
        """First characters of the content on a single line."""
        return make_preview(self.content)


@dataclass(frozen=True)
class DocumentPreview:
    """Compact view of a document used in listings and search results."""

    id: str
    title: str
    description: str
    category: str
    subcategory: str | None
    preview: str

    @classmethod
    def from_document(cls, document: Document) -> "DocumentPreview":
        return cls(
            id=document.id,
            title=document.title,
            description=document.description,
            category=document.category,
            subcategory=document.subcategory,
            preview=document.preview,
        )


@dataclass(frozen=True)
class CategoryListing:
    """Documents of one category grouped by subcategory.

    Documents without a subcategory live in ``root``; ``by_subcategory``
    follows the order of ``subcategories``.
    """

    category: str
    subcategories: list[str] = field(default_factory=list)
    root: list[DocumentPreview] = field(default_factory=list)
    by_subcategory: dict[str, list[DocumentPreview]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.root and not any(self.by_subcategory.values())


@dataclass(frozen=True)
class CategorySummary:
    """Document count and subcategories of a single category."""

    category: str
    count: int
    subcategories: list[str]


@dataclass(frozen=True)
class TopicsSummary:
    """Overview of the whole collection."""

    total: int
    categories: list[CategorySummary]


@dataclass(frozen=True)
class Comparison:
    """Two topics resolved to documents, with the tags they share."""

    topic1: str
    topic2: str
    first: Document | None
    second: Document | None
    common_tags: list[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.first is not None and self.second is not None


def make_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Return the first ``length`` characters with newlines collapsed, plus an ellipsis."""
    return content[:length].replace("\n", " ") + "..."
