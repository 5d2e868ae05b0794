"""API request and response models."""

from serp_collector.api.models.health import HealthResponse
from serp_collector.api.models.search import CollectResponse

__all__ = [
    "CollectResponse",
    "HealthResponse",
]
