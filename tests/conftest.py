"""Shared test fixtures for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import respx

from mbrelease.config import MBReleaseSettings
from mbrelease.core.models import AlbumInfo, TrackInfo
from mbrelease.core.types import ProviderKey

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Test Data Constants
# ============================================================================


TEST_SERVER = "https://mb.example.org"
TEST_API_BASE = TEST_SERVER + "/ws/2"

OK_COMPUTER_RELEASE_ID = "0b6b4ba0-d36f-47bd-b4ea-6a5b91842d29"
OK_COMPUTER_RELEASE_GROUP_ID = "b1392450-e666-3926-a536-22c65f834433"
OKNOTOK_RELEASE_ID = "6f1f4b8e-1f3c-4a5d-9d2a-3c1b2e4f5a6b"
OKNOTOK_RELEASE_GROUP_ID = "d1f3e6c2-9a1b-4c7d-8e5f-2b3a4c5d6e7f"
RADIOHEAD_ARTIST_ID = "a74b1b7f-71a5-4011-9441-d0b5e4122711"


def load_xml_fixture(name: str) -> bytes:
    """Load an XML fixture file.

    Args:
        name: Fixture filename without extension (e.g., "release_search")

    Returns:
        Raw document bytes
    """
    fixture_path = FIXTURES_DIR / "musicbrainz" / f"{name}.xml"
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_bytes()


# ============================================================================
# Sample Document Fixtures
# ============================================================================


@pytest.fixture
def release_search_xml() -> bytes:
    """Release search answer with two OK Computer releases."""
    return load_xml_fixture("release_search")


@pytest.fixture
def release_group_search_xml() -> bytes:
    """Release-group search answer for the OK Computer release."""
    return load_xml_fixture("release_group_search")


@pytest.fixture
def empty_release_list_xml() -> bytes:
    """Release search answer with no matches."""
    return load_xml_fixture("empty_release_list")


# ============================================================================
# Sample Album Fixtures
# ============================================================================


@pytest.fixture
def album_by_name() -> AlbumInfo:
    """Album known only by title and artist name."""
    return AlbumInfo(name="OK Computer", album_artists=["Radiohead"])


@pytest.fixture
def album_by_release_id() -> AlbumInfo:
    """Album tagged with a release id."""
    return AlbumInfo(
        name="OK Computer",
        provider_ids={ProviderKey.MUSICBRAINZ_ALBUM: OK_COMPUTER_RELEASE_ID},
    )


@pytest.fixture
def album_with_tagged_tracks() -> AlbumInfo:
    """Album whose identifiers only exist on its tracks."""
    return AlbumInfo(
        name="OK Computer",
        tracks=[
            TrackInfo(name="Airbag"),
            TrackInfo(
                name="Paranoid Android",
                album_artists=["Radiohead"],
                provider_ids={
                    ProviderKey.MUSICBRAINZ_RELEASE_GROUP: OK_COMPUTER_RELEASE_GROUP_ID,
                    ProviderKey.MUSICBRAINZ_ALBUM_ARTIST: RADIOHEAD_ARTIST_ID,
                },
            ),
        ],
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> MBReleaseSettings:
    """Settings pointing at a private mirror with no request spacing."""
    return MBReleaseSettings(
        server=TEST_SERVER,
        rate_limit_ms=0,
        user_agent="mbrelease-tests/0.1.0",
        timeout=5.0,
        log_level="DEBUG",
    )


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Only outgoing catalog requests are intercepted; ASGITransport calls
    into the app directly and is unaffected.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router
