"""API module with FastAPI application."""

from serp_collector.api.app import app, create_app

__all__ = ["app", "create_app"]
