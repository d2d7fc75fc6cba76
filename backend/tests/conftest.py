"""
Tarot Reader Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── test_settings: Development-mode Settings, isolated from any .env file
    ├── store: Empty ReadingStore
    ├── seeded_store: ReadingStore holding the three sample readings
    ├── test_app: FastAPI app built by create_app(test_settings)
    └── test_client: HTTPX AsyncClient talking to test_app
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ.pop("ALLOWED_ORIGINS", None)

from app.config import Settings  # noqa: E402
from app.sample_data import seed_sample_readings  # noqa: E402
from app.store import ReadingStore  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    """Development-mode settings that ignore any local .env file."""
    return Settings(_env_file=None, environment="development", allowed_origins=None)


@pytest.fixture
def store() -> ReadingStore:
    return ReadingStore()


@pytest.fixture
def seeded_store() -> ReadingStore:
    store = ReadingStore()
    seed_sample_readings(store)
    return store


@pytest.fixture
def test_app(test_settings):
    """A fresh application (and therefore a fresh, freshly seeded store) per test."""
    from app.main import create_app
    return create_app(test_settings)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
