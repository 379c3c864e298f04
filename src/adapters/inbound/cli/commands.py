"""CLI interface for Docshelf."""

import asyncio
import json
from collections.abc import Awaitable, Callable

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ....composition.container import get_documentation_service, get_store, validate_docs_root
from ....config.logging import setup_logging
from ....config.settings import settings
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="docshelf",
    help="Docshelf - browse and search a markdown documentation tree",
    add_completion=False,
)

console = Console(legacy_windows=False)


def handle_cli_error(exc: Exception) -> None:
    """Display an error in the CLI.

    In debug mode, shows full JSON error details.
    In normal mode, shows a user-friendly message with error code.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=settings.debug)

    if settings.debug:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error [{error_code}]:[/] {error_data['error']['message']}")
    console.print(f"[dim]Type: {error_data['error']['type']}[/]")
    console.print("[dim]Set DOCSHELF_DEBUG=true for full details[/]")


def _run(render: Callable[[], Awaitable[str]], raw: bool) -> None:
    """Run an async renderer and print its text."""
    try:
        text = asyncio.run(render())
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if raw:
        console.print(text, markup=False, highlight=False)
    else:
        console.print(Markdown(text))


@app.callback()
def main(
    log_level: str = typer.Option(None, help="Override DOCSHELF_LOG_LEVEL"),
) -> None:
    setup_logging(log_level or settings.log_level, log_file=settings.log_file)


@app.command()
def show(
    doc_id: str = typer.Argument(..., help="Document identifier, e.g. guides/setup/install"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Show a single document."""
    _run(lambda: get_documentation_service().read_document(doc_id), raw)


@app.command()
def category(
    name: str = typer.Argument(..., help="Category name"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Show a category overview grouped by subcategory."""
    _run(lambda: get_documentation_service().read_category(name), raw)


@app.command()
def subcategory(
    category_name: str = typer.Argument(..., metavar="CATEGORY", help="Category name"),
    name: str = typer.Argument(..., help="Subcategory name"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """List the documents of a subcategory."""
    _run(lambda: get_documentation_service().read_subcategory(category_name, name), raw)


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to search for (case-insensitive)"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Search titles, descriptions, content and tags."""
    _run(lambda: get_documentation_service().search_docs(query), raw)


@app.command()
def topics(
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Show the documentation overview."""
    _run(lambda: get_documentation_service().list_topics(), raw)


@app.command()
def categories(
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """List available categories."""
    _run(lambda: get_documentation_service().list_categories(), raw)


@app.command()
def compare(
    topic1: str = typer.Argument(..., help="First topic ID or keyword"),
    topic2: str = typer.Argument(..., help="Second topic ID or keyword"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Compare two topics and list their common tags."""
    _run(lambda: get_documentation_service().compare_docs(topic1, topic2), raw)


@app.command()
def read(
    uri: str = typer.Argument(..., help="docs://, docs-category:// or docs-subcategory:// URI"),
    raw: bool = typer.Option(False, "--raw", help="Print plain text, not rendered markdown"),
) -> None:
    """Open an access pointer printed by another command."""

    async def render() -> str:
        _, text = await get_documentation_service().read_resource(uri)
        return text

    _run(render, raw)


@app.command()
def check() -> None:
    """Load the documentation tree and report what was indexed."""
    console.print("[bold]Docshelf Index Check[/]\n")

    try:
        validate_docs_root(settings.docs_root)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    store = get_store()

    async def collect():
        documents = await store.ensure_loaded()
        per_category = []
        for name in await store.list_categories():
            ids = [doc_id for doc_id, doc in documents.items() if doc.category == name]
            per_category.append((name, await store.list_subcategories(name), ids))
        return documents, per_category

    documents, per_category = asyncio.run(collect())
    console.print(f"[green]OK[/] Loaded {len(documents)} documents from {settings.docs_root}")

    table = Table(title="Categories")
    table.add_column("Category")
    table.add_column("Subcategories", justify="right")
    table.add_column("Documents", justify="right")
    table.add_column("Sample IDs")
    for name, subcats, ids in per_category:
        table.add_row(name, str(len(subcats)), str(len(ids)), ", ".join(ids[:3]))
    console.print(table)

    if not documents:
        console.print("\n[yellow]No documents found. Add .md or .mdx files under a category.[/]")
        raise typer.Exit(1)

    sample = next(iter(documents.values()))
    console.print(f'\n[bold]Sample document "{sample.id}":[/]')
    console.print(f"  - Title: {sample.title}")
    console.print(f"  - Description: {sample.description or 'N/A'}")
    console.print(f"  - Category: {sample.category}")
    console.print(f"  - Subcategory: {sample.subcategory or 'N/A'}")
    console.print(f"  - Tags: {', '.join(sample.tags)}")
    console.print(f"  - Content length: {len(sample.content)} characters")


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind address (defaults to DOCSHELF_API_HOST)"),
    port: int = typer.Option(None, help="Port (defaults to DOCSHELF_API_PORT)"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run(
        "src.adapters.inbound.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
