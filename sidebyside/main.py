"""SideBySide API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SideBySideError → structured JSON responses
    - Document loaded once on startup via lifespan context manager
    - Read-only: no route mutates the document

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sidebyside.api.error_handlers import register_error_handlers
from sidebyside.api.routes import document, entries, health
from sidebyside.config import get_settings
from sidebyside.infrastructure.document_source import init_document_source
from sidebyside.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_document_source(settings.source_path)
    logger.info("SideBySide API started")
    yield
    logger.info("SideBySide API shutting down")


app = FastAPI(
    title="SideBySide API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(entries.router)
app.include_router(entries.positions_router)
app.include_router(document.router)

register_error_handlers(app)
