"""Liveness endpoint."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from club.config import Settings

STARTED_AT = datetime.now(timezone.utc)

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    environment: str
    git_sha: str
    started_at: datetime
    uptime_seconds: int


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests; no dependencies are checked."""
    now = datetime.now(timezone.utc)
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        git_sha=settings.git_sha,
        started_at=STARTED_AT,
        uptime_seconds=int((now - STARTED_AT).total_seconds()),
    )
