"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from icebreaker.config import Settings
from icebreaker.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Service liveness plus the build and storage it runs with."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    storage_path: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the service is up. Storage files are not touched."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        storage_path=str(settings.storage.path),
    )
