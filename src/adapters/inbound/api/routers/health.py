"""Health check endpoints."""

from fastapi import APIRouter, Depends

from .....core.services.documentation_store import DocumentationStore
from ..deps import documentation_store
from ..models import HealthResponse

API_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        HealthResponse with current status and version.
    """
    return HealthResponse(status="healthy", version=API_VERSION, documents="not_checked")


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(
    store: DocumentationStore = Depends(documentation_store),
) -> HealthResponse:
    """Readiness probe.

    Loads the documentation index if needed and reports its size.

    Returns:
        HealthResponse with detailed status.
    """
    count = await store.preload()
    return HealthResponse(status="ready", version=API_VERSION, documents=f"loaded ({count} docs)")
