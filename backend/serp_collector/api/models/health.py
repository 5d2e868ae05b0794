"""Health check models."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"] = Field(default="healthy", description="Service health status")
    version: str = Field(..., description="API version")
    database: Literal["up", "down"] = Field(..., description="MongoDB reachability")
