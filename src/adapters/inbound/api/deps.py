"""FastAPI dependency injection for Docshelf."""

from ....application.services.documentation_service import DocumentationService
from ....composition.container import get_documentation_service, get_store
from ....core.services.documentation_store import DocumentationStore


def documentation_service() -> DocumentationService:
    """Process-wide DocumentationService."""
    return get_documentation_service()


def documentation_store() -> DocumentationStore:
    """Process-wide DocumentationStore."""
    return get_store()
