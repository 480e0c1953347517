"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if the catalog store is unreachable

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from pizzeria.api.dependencies import get_catalog_store
from pizzeria.core.repository_protocols import CatalogStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "pizzeria-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: CatalogStore = Depends(get_catalog_store)):
    """Readiness check — includes catalog store connectivity."""
    if not await store.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
                "backend": store.backend,
            },
        )
    return {"status": "ready", "checks": {store.backend: "healthy"}}
