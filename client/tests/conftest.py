"""Pytest configuration and fixtures."""

import httpx
import pytest

from api.config import Settings
from api.server import create_app


@pytest.fixture
def app_transport():
    """Transport that serves requests from an in-process application."""
    return httpx.ASGITransport(app=create_app(Settings()))


@pytest.fixture
def make_transport():
    """Factory for a transport that answers every request with a fixed response."""

    def _make(status_code: int, **kwargs) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, **kwargs)

        return httpx.MockTransport(handler)

    return _make
