"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from mbrelease.api.app import create_app
from mbrelease.client import MusicBrainzClient
from mbrelease.config import MBReleaseSettings


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def test_app(mock_settings: MBReleaseSettings) -> AsyncIterator[FastAPI]:
    """
    Create a test application with an open MusicBrainz client.

    ASGITransport does not run the lifespan, so the client the lifespan
    would create is opened here instead.
    """
    app = create_app(settings=mock_settings)

    async with MusicBrainzClient(mock_settings) as client:
        app.state.musicbrainz_client = client
        yield app
        app.state.musicbrainz_client = None


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client



# ============================================================================
# Marker Registration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test exercising the HTTP API",
    )
