"""Text rendering of query results for human- and LLM-facing callers.

Every renderer returns a plain string. Missing documents and empty results
are rendered as descriptive text rather than raised.
"""

import re

from ..domain import CategoryListing, Comparison, Document, DocumentPreview, TopicsSummary
from ..domain.resource_uri import category_uri, document_uri, subcategory_uri

DATE_FORMAT = "%Y-%m-%d"


def _quote(description: str) -> str:
    return f"> {description}\n\n" if description else ""


def _location(category: str, subcategory: str | None) -> str:
    return f"{category} / {subcategory}" if subcategory else category


def _anchor(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def render_document(doc_id: str, document: Document | None) -> str:
    """Full document with a heading, quoted description and metadata line."""
    if document is None:
        return f"Documentation not found for {doc_id}"

    metadata = " | ".join(
        part
        for part in (
            f"Category: {document.category}",
            f"Subcategory: {document.subcategory}" if document.subcategory else "",
            f"Tags: {', '.join(document.tags)}",
            f"Last Updated: {document.updated_at.strftime(DATE_FORMAT)}"
            if document.updated_at
            else "",
        )
        if part
    )
    return f"# {document.title}\n\n{_quote(document.description)}{metadata}\n\n{document.content}"


def _preview_section(heading: str, preview: DocumentPreview) -> str:
    return (
        f"{heading} {preview.title}\n"
        f"{_quote(preview.description)}"
        f"{preview.preview}\n\n"
        f"Access full document: {document_uri(preview.id)}"
    )


def render_category(listing: CategoryListing) -> str:
    """Category overview: subcategory navigation, root documents, then each subcategory."""
    if listing.is_empty:
        return f"No documentation found for category: {listing.category}"

    content = f"# {listing.category} Documentation\n\n"

    if listing.subcategories:
        content += "## Subcategories\n\n"
        for subcat in listing.subcategories:
            content += f"- [{subcat}](#{_anchor(subcat)})\n"
        content += "\n"

    if listing.root:
        content += "## Main Documents\n\n"
        for preview in listing.root:
            content += _preview_section("###", preview) + "\n\n"

    for subcat in listing.subcategories:
        bucket = listing.by_subcategory.get(subcat)
        if bucket:
            content += f"## {subcat}\n\n"
            for preview in bucket:
                content += _preview_section("###", preview) + "\n\n"

    return content


def render_subcategory(category: str, subcategory: str, previews: list[DocumentPreview]) -> str:
    if not previews:
        return f"No documentation found for subcategory: {subcategory} in category: {category}"

    sections = "\n\n".join(_preview_section("##", preview) for preview in previews)
    return f"# {category} / {subcategory}\n\n{sections}"


def render_search(query: str, results: list[DocumentPreview]) -> str:
    if not results:
        return f'No results found for "{query}".'

    entries = "\n\n".join(_search_entry(r) for r in results)
    return f'Found {len(results)} results for "{query}":\n\n{entries}'


def _search_entry(result: DocumentPreview) -> str:
    description = f"{result.description}\n  " if result.description else ""
    return (
        f"- {result.title} [{_location(result.category, result.subcategory)}]\n"
        f"  {description}{result.preview}\n"
        f"  Access with: {document_uri(result.id)}"
    )


def render_topics(summary: TopicsSummary) -> str:
    """Collection overview with per-category counts and access pointers."""
    sections = []
    for s in summary.categories:
        if s.subcategories:
            subcats = "\n".join(
                f"- {sub} (Access: {subcategory_uri(s.category, sub)})" for sub in s.subcategories
            )
            subcat_block = f"Subcategories:\n{subcats}\n"
        else:
            subcat_block = "No subcategories."
        sections.append(
            f"## {s.category} ({s.count} documents)\n"
            f"Access category: {category_uri(s.category)}\n\n"
            f"{subcat_block}"
        )

    return (
        f"# Documentation Overview\n\nTotal documents: {summary.total}\n\n" + "\n\n".join(sections)
    )


def render_categories(categories: list[str]) -> str:
    if not categories:
        return "No categories found."

    bullets = "\n\n".join(f"- {cat}\n  Access with: {category_uri(cat)}" for cat in categories)
    return f"Available documentation categories:\n\n{bullets}"


def _comparison_header(document: Document) -> str:
    return (
        f"## {document.title} [{_location(document.category, document.subcategory)}]\n"
        f"{_quote(document.description)}"
        f"Access with: {document_uri(document.id)}\n\n"
    )


def render_comparison(comparison: Comparison) -> str:
    """Side-by-side headers and common tags, or which topic failed to resolve."""
    first, second = comparison.first, comparison.second
    if not comparison.resolved:
        if first is None and second is None:
            return (
                f'Could not find documentation for either "{comparison.topic1}" '
                f'or "{comparison.topic2}".'
            )
        missing = comparison.topic1 if first is None else comparison.topic2
        return f'Could not find documentation for "{missing}".'

    common = ", ".join(comparison.common_tags) or "No common tags."
    return (
        f"# Comparison: {first.title} vs {second.title}\n\n"
        f"{_comparison_header(first)}"
        f"{_comparison_header(second)}"
        f"## Common Tags\n"
        f"{common}"
    )
