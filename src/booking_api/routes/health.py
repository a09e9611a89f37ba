"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from booking_api.models.common import HealthResponse
from booking_engine.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    response_model=HealthResponse,
)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        timestamp=datetime.now(UTC).isoformat(),
        environment=settings.environment,
    )
