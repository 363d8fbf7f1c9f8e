"""Liveness and readiness probes."""

# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...infrastructure.db.mongo_connection import ping_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe. Returns 200 while the process is up."""
    return {"status": "healthy", "service": "devconnect-api"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe; 503 when MongoDB is unreachable."""
    if not await ping_database():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
