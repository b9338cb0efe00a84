"""
Liveness and readiness endpoints.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.database.connections import get_database
from app.dependencies.auth import public_route

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"], dependencies=[Depends(public_route)])


@router.get("/health", summary="Liveness check")
async def health_check():
    """Returns 200 while the process is serving requests."""
    return {"status": "healthy"}


@router.get("/health/ready", summary="Readiness check")
async def readiness_check():
    """
    Ping the profile database.

    Returns 503 when MongoDB cannot be reached, since no profile endpoint
    can answer without it.
    """
    try:
        db = await get_database()
        await db.command("ping")
    except Exception as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": str(e)},
        )

    return {"status": "ready", "database": db.name}
