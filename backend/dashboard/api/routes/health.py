"""Health Routes — liveness and readiness of the invoice dashboard API.

Invariants:
    - GET /api/v1/health/ returns 200 while the process serves requests
    - GET /api/v1/health/ready returns 503 when the invoice store
      (app.state.db_manager) cannot answer SELECT 1
    - Both paths sit outside the session gate, so checks need no login cookie

Design Decisions:
    - Readiness reports only the invoice store: the view cache is in-process
      and cannot be unavailable on its own
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: the dashboard process is up."""
    return {
        "status": "healthy",
        "service": "invoice-dashboard-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness: the invoice store answers a trivial query."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
