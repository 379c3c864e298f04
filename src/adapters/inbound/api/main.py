"""FastAPI application for the Docshelf documentation API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ....composition.container import get_store
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import DocshelfError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .routers import docs, health

setup_logging(settings.log_level, log_file=settings.log_file, json_format=settings.log_json)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Docshelf API",
    description=(
        "Serves a category/subcategory tree of markdown documentation: "
        "lookup by identifier, category listings, search and topic comparison."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(health.router)
app.include_router(docs.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(DocshelfError)
async def docshelf_error_handler(request: Request, exc: DocshelfError) -> JSONResponse:
    """Handle all DocshelfError exceptions with structured JSON response."""
    log_exception(
        exc,
        level=logging.WARNING,
        extra_context={"path": str(request.url.path), "method": request.method},
    )

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=exc.to_dict(include_trace=settings.debug),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with structured JSON response."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=format_exception_json(exc, include_trace=settings.debug),
    )


# =============================================================================
# Lifecycle Events
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Preload the documentation index so the first request is not a cold start."""
    logger.info("Docshelf API starting up...")
    count = await get_store().preload()
    logger.info(f"Documentation ready: {count} documents")
    logger.info("Debug mode: %s", "ENABLED" if settings.debug else "DISABLED")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Docshelf API shutting down...")


# Export for uvicorn
__all__ = ["app"]
