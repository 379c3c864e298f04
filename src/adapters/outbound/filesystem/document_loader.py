"""Load a single documentation file into a Document record."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from ....core.domain import Document
from ....core.domain.exceptions import DocumentLoadError
from ....core.services.metadata_extractor import extract_metadata

logger = logging.getLogger(__name__)

# Title words at or below this length are not used as tags
MIN_TITLE_TAG_LENGTH = 3


def build_tags(
    category: str,
    subcategory: str | None,
    filename: str,
    title: str,
) -> tuple[str, ...]:
    """Build the ordered, deduplicated tag set for a document.

    Args:
        category: Category name.
        subcategory: Optional subcategory name.
        filename: File name without its extension.
        title: Extracted document title.

    Returns:
        Tags in first-seen order: category, subcategory, file name, the
        hyphen-separated parts of the file name, then lower-cased title
        words longer than three characters.
    """
    tags = [category]
    if subcategory:
        tags.append(subcategory)
    tags.append(filename)

    if "-" in filename:
        tags.extend(part for part in filename.split("-") if part)

    tags.extend(word for word in title.lower().split() if len(word) > MIN_TITLE_TAG_LENGTH)

    return tuple(dict.fromkeys(tags))


def build_document_id(category: str, subcategory: str | None, filename: str) -> str:
    """Join category, optional subcategory and file name into an identifier."""
    parts = [category]
    if subcategory:
        parts.append(subcategory)
    parts.append(filename)
    return "/".join(parts)


def load_document(path: Path, category: str, subcategory: str | None = None) -> Document:
    """Read a documentation file and build its Document record.

    Args:
        path: Path to the ``.md``/``.mdx`` file.
        category: Category the file belongs to.
        subcategory: Subcategory the file belongs to, if any.

    Returns:
        The fully populated Document.

    Raises:
        DocumentLoadError: If the file cannot be read, decoded or stat'ed.
    """
    try:
        content = path.read_bytes().decode("utf-8")
        modified = path.stat().st_mtime
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(
            f"Failed to load document {path.name}",
            path=path,
            cause=e,
            context={"category": category, "subcategory": subcategory},
        ) from e

    metadata = extract_metadata(content)
    filename = path.stem

    document = Document(
        id=build_document_id(category, subcategory, filename),
        title=metadata.title,
        description=metadata.description,
        content=content,
        category=category,
        subcategory=subcategory,
        tags=build_tags(category, subcategory, filename, metadata.title),
        updated_at=datetime.fromtimestamp(modified, tz=UTC),
        path=path,
    )
    logger.debug(f"Loaded document {document.id} ({len(content)} chars)")
    return document
