"""Health & Readiness Probes.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if no document is loaded (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from sidebyside.infrastructure import document_source as source_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "sidebyside-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: requires a loaded, non-empty document."""
    source = source_module.document_source
    if source is None or not source.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "document_unavailable",
            },
        )
    return {"status": "ready", "checks": {"document": "loaded"}}
