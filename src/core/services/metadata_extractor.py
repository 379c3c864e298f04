"""Title and description extraction from document headings."""

import re

from ..domain import UNTITLED_DOCUMENT, DocumentMetadata

# "# Title [Description]" with the bracketed part optional; a trailing "\r" ends the line
HEADING_PATTERN = re.compile(r"^#\s+([^\r\n]*?)(\s+\[([^\r\n]*?)\])?\r?$", re.MULTILINE)


def extract_metadata(content: str) -> DocumentMetadata:
    """Extract title and description from the first ``#`` heading line.

    Args:
        content: Raw document text.

    Returns:
        DocumentMetadata. Falls back to "Untitled Document" and an empty
        description when there is no heading; never raises.
    """
    match = HEADING_PATTERN.search(content)
    if not match:
        return DocumentMetadata(title=UNTITLED_DOCUMENT, description="")

    title = match.group(1).strip()
    description = match.group(3).strip() if match.group(3) else ""
    return DocumentMetadata(title=title, description=description)
