"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from src import __version__
from src.core.config import settings
from src.service.approval.settings import get_approval_settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    profile_store: str
    range_policy: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status and active configuration of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        profile_store=settings.profile_store,
        range_policy=get_approval_settings().range_policy.value,
    )
