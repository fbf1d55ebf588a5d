"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from api.config import Settings
from api.server import create_app


@pytest.fixture
def test_settings():
    """Settings with a recognizable public URL."""
    return Settings(public_url="http://testserver:8787")


@pytest.fixture
def app(test_settings):
    """A fresh application instance."""
    return create_app(test_settings)


@pytest_asyncio.fixture
async def http(app):
    """In-process HTTP client for the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
