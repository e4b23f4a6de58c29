"""Health check endpoints."""

from datetime import datetime

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from infrastructure.database.session import get_async_session

logger = structlog.get_logger()

router = APIRouter(tags=["health"])

API_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Service status snapshot."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None


def _snapshot(status: str, database: str | None = None) -> HealthResponse:
    return HealthResponse(
        status=status,
        version=API_VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        database=database,
    )


async def _check_database(db: AsyncSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("database_check_failed", error_type=type(e).__name__)
        return "unhealthy"
    return "healthy"


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    """Answer without touching dependencies; used by load balancers."""
    return _snapshot("healthy")


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Readiness check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Report ``degraded`` when the database does not answer."""
    database = await _check_database(db)
    return _snapshot("healthy" if database == "healthy" else "degraded", database)
