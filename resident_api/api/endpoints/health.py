"""
Health checks - for load balancers, Kubernetes, and monitoring.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from resident_api.core.dependencies import AppSettings
from resident_api.schemas.system import HealthResponse

router = APIRouter()


def _utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/", response_model=HealthResponse, summary="Health endpoint")
async def health(settings: AppSettings):
    """Liveness: is the process up?"""
    return HealthResponse(
        status="ok",
        message="Service is healthy",
        timestamp=_utc_timestamp(),
        environment=settings.environment,
    )


@router.get("/ready")
async def ready():
    """Readiness: can accept traffic? Nothing external to wait for."""
    return {"status": "ready"}
