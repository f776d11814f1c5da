"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import Response

from mbrelease.resolution.dispatcher import DispatcherConfig, RateLimitedDispatcher
from tests.conftest import TEST_SERVER


# ============================================================================
# Dispatcher Fixtures
# ============================================================================


@pytest.fixture
def dispatcher_config() -> DispatcherConfig:
    """Dispatcher config for a private mirror with no request spacing."""
    return DispatcherConfig(
        server=TEST_SERVER,
        rate_limit_ms=0,
        timeout=5.0,
        user_agent="mbrelease-tests/0.1.0",
    )


@pytest.fixture
async def dispatcher(dispatcher_config: DispatcherConfig) -> AsyncIterator[RateLimitedDispatcher]:
    """Create a dispatcher and close it afterwards."""
    async with RateLimitedDispatcher(dispatcher_config) as d:
        yield d


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_xml_response(content: bytes, status_code: int = 200) -> Response:
    """Create a mock XML response."""
    return Response(
        status_code=status_code,
        content=content,
        headers={"Content-Type": "application/xml; charset=UTF-8"},
    )


def mock_throttled_response() -> Response:
    """Create a mock 503 throttling response."""
    return Response(
        status_code=503,
        text="Your requests are exceeding the allowable rate limit.",
    )
