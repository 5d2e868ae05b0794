"""Health check endpoint."""

from fastapi import APIRouter, Request

from serp_collector import __version__
from serp_collector.api.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report API status and MongoDB reachability."""
    database_up = await request.app.state.store.ping()
    return HealthResponse(
        status="healthy" if database_up else "degraded",
        version=__version__,
        database="up" if database_up else "down",
    )
