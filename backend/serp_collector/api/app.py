"""FastAPI application initialization and configuration."""

from contextlib import asynccontextmanager

import aiohttp
import structlog
from fastapi import FastAPI

from serp_collector import __version__
from serp_collector.api.routes import health_router, search_router
from serp_collector.collector.service import SearchCollector
from serp_collector.config.logging_config import configure_logging
from serp_collector.config.settings import get_settings
from serp_collector.search.fetcher import SearchPageFetcher
from serp_collector.storage.mongo import MongoRecordStore, StorageError

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI app.

    Owns the shared HTTP session and MongoDB client for the whole process.
    """
    settings = get_settings()
    configure_logging(debug_mode=settings.debug, log_level=settings.log_level)

    logger.info("Starting up SERP collector API...")

    session = aiohttp.ClientSession()
    store = MongoRecordStore.from_settings(settings)
    try:
        fetcher = SearchPageFetcher(
            session,
            timeout=settings.fetch_timeout,
            max_retries=settings.fetch_max_retries,
            retry_backoff=settings.fetch_retry_backoff,
            user_agent=settings.fetch_user_agent,
        )

        logger.info("Initializing MongoDB connection...", uri=settings.mongodb_uri)
        try:
            await store.connect()
        except StorageError:
            # Requests fail with 500 until the server is reachable.
            logger.error("MongoDB unavailable at startup; continuing")

        app.state.settings = settings
        app.state.http_session = session
        app.state.store = store
        app.state.collector = SearchCollector(fetcher=fetcher, store=store)

        logger.info("SERP collector API started successfully", port=settings.api_port)

        yield
    finally:
        logger.info("Shutting down SERP collector API...")
        await session.close()
        await store.close()
        logger.info("SERP collector API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title="SERP Collector API",
        description="Collects search results page anchors into MongoDB",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(search_router)

    return app


app = create_app()
