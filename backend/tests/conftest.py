"""
Notes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── settings: Settings built from a clean environment
    ├── app: FastAPI app from create_app(settings)
    └── test_client: HTTPX AsyncClient bound to `app` over ASGITransport
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Reduce noise during tests. Set before any app import.
os.environ["NOTES_API_LOG_LEVEL"] = "WARNING"

from notes_api.config import Settings  # noqa: E402
from notes_api.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Settings with defaults, except for the quieter log level above."""
    return Settings()


@pytest.fixture
def app(settings):
    """
    A fresh application per test.

    Tests that need extra routes (e.g. one that raises) can register them on
    this app before the first request is sent.
    """
    return create_app(settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_greeting(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
