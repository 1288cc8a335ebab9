"""Health & Readiness Probes — root liveness and database readiness endpoints.

Invariants:
    - GET / always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from stoneboard.core.language_strings import get_message
from stoneboard.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def root():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"message": get_message("API_ROOT")}


@router.get("/api/health/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
