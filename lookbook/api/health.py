"""Health check endpoints."""

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text

from lookbook.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="lookbook-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check():
    """Check if service is ready to accept requests.

    With the database backend this runs a trivial query; the in-memory
    backend is always ready.

    Returns:
        Readiness status, or 503 when the database is unreachable.
    """
    if settings.catalog_backend == "memory":
        return {"status": "ready", "backend": "memory"}

    from lookbook.infrastructure.database import engine

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "backend": "database"},
        )
    return {"status": "ready", "backend": "database"}
