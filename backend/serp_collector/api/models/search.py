"""Search collection models."""

from pydantic import BaseModel, Field


class CollectResponse(BaseModel):
    """Successful collection response."""

    message: str = Field(..., description="Fixed success message")
