"""
Global test fixtures for the myapp MongoDB initializer.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Settings instances that never read the host environment
- Timestamp helpers
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_myapp_db(mock_async_mongo_client):
    """Provide an empty mock myapp database."""
    yield mock_async_mongo_client["myapp"]


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings pointing at a local test server, ignoring .env files."""
    from mongo_init.config import Settings
    return Settings(
        _env_file=None,
        mongo_uri="mongodb://test:27017",
        mongo_server_selection_timeout_ms=1000,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings between tests."""
    from mongo_init.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def as_utc():
    """
    Helper normalizing datetimes read back from MongoDB.

    Stored datetimes come back naive (UTC) and truncated to milliseconds.
    """
    def _as_utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
    return _as_utc
