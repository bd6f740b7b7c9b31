"""
Health Check Handler

/health reports the build, /ready proves the database answers, /live only
proves the process does.
"""

from fastapi import APIRouter
from sqlalchemy import text

from chatterbox.config.settings import settings
from chatterbox.shared.schemas.common import HealthResponse
from chatterbox.api.dependencies.database import DbSession


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check for load balancers.

    Runs a trivial query so a missing database marks the instance not ready.
    """
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
