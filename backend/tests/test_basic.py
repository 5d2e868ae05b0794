"""Basic tests for core functionality."""

import logging

import pytest
import structlog


def test_imports():
    """Test that all main modules can be imported."""
    from serp_collector.config.settings import get_settings

    settings = get_settings()
    assert settings is not None

    from serp_collector.search import SearchPageFetcher, SearchRecord, extract_records

    assert SearchPageFetcher is not None
    assert SearchRecord is not None
    assert extract_records is not None

    from serp_collector.api.app import create_app

    app = create_app()
    paths = set(app.openapi()["paths"])
    assert {"/", "/health"} <= paths


def test_settings_defaults(monkeypatch):
    """Defaults match the fixed deployment of the collector."""
    from serp_collector.config.settings import Settings

    for name in ("API_PORT", "MONGODB_URI", "MONGODB_DATABASE", "MONGODB_COLLECTION", "FETCH_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 8080
    assert settings.mongodb_uri == "mongodb://localhost:27017"
    assert settings.mongodb_database == "collections"
    assert settings.mongodb_collection == "data"
    assert settings.mongodb_connect_timeout == 10
    assert settings.fetch_max_retries == 0
    assert settings.fetch_user_agent is None


def test_settings_from_environment(monkeypatch):
    from serp_collector.config.settings import Settings

    monkeypatch.setenv("MONGODB_URI", "mongodb://mongo:27017")
    monkeypatch.setenv("FETCH_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.mongodb_uri == "mongodb://mongo:27017"
    assert settings.fetch_timeout == 2.5


def test_settings_validation():
    from pydantic import ValidationError

    from serp_collector.config.settings import Settings

    with pytest.raises(ValidationError):
        Settings(_env_file=None, fetch_timeout=0)


def test_configure_logging_sets_levels():
    from serp_collector.config.logging_config import configure_logging

    try:
        configure_logging(debug_mode=False, log_level="warning")
        assert logging.getLogger("pymongo").level == logging.WARNING
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
