"""API routes."""

from serp_collector.api.routes.health import router as health_router
from serp_collector.api.routes.search import router as search_router

__all__ = [
    "health_router",
    "search_router",
]
