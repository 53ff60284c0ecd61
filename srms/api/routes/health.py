"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the store's directory is not writable (readiness)
"""

import logging
import os

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from srms.services.context import ResultsContext, get_context

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "srms-api", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check(ctx: ResultsContext = Depends(get_context)):
    """Readiness probe: the store directory must exist and be writable."""
    store_dir = ctx.store.data_path.resolve().parent
    if not (store_dir.is_dir() and os.access(store_dir, os.W_OK)):
        logger.warning(f"Store directory not writable: {store_dir}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {
        "status": "ready",
        "checks": {"store": "healthy", "subjects": ctx.subjects.count},
    }
