"""Application settings with environment variable support."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8080, description="API port")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    # Search page fetcher
    fetch_timeout: float = Field(default=30.0, gt=0, description="Search page request timeout in seconds")
    fetch_max_retries: int = Field(default=0, ge=0, description="Extra attempts when the search request cannot be sent")
    fetch_retry_backoff: float = Field(default=0.5, ge=0, description="Pause between attempts, multiplied by attempt number")
    fetch_user_agent: Optional[str] = Field(
        default=None, description="User-Agent header for search requests (client default when unset)"
    )

    # MongoDB
    mongodb_uri: str = Field(default="mongodb://localhost:27017", description="MongoDB connection URI")
    mongodb_database: str = Field(default="collections", description="MongoDB database name")
    mongodb_collection: str = Field(default="data", description="MongoDB collection for search records")
    mongodb_connect_timeout: float = Field(
        default=10.0, gt=0, description="Upper bound in seconds for connect, ping and insert"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
