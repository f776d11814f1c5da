"""Tests for settings loading."""

from __future__ import annotations

import pytest

from mbrelease.config import (
    DEFAULT_RATE_LIMIT_MS,
    DEFAULT_SERVER,
    MBReleaseSettings,
    clamp_rate_limit,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("SERVER", "RATE_LIMIT_MS", "REPLACE_ARTIST_NAME", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"MBRELEASE_{name}", raising=False)


class TestClampRateLimit:
    """Tests for the public server interval floor."""

    def test_public_server_is_clamped(self):
        assert clamp_rate_limit(DEFAULT_SERVER, 500) == DEFAULT_RATE_LIMIT_MS

    def test_public_server_with_trailing_slash(self):
        assert clamp_rate_limit(DEFAULT_SERVER + "/", 0) == DEFAULT_RATE_LIMIT_MS

    def test_mirror_is_not_clamped(self):
        assert clamp_rate_limit("http://localhost:5000", 0) == 0


class TestSettings:
    """Tests for MBReleaseSettings."""

    def test_defaults(self):
        settings = MBReleaseSettings(_env_file=None)

        assert settings.server == DEFAULT_SERVER
        assert settings.rate_limit_ms == DEFAULT_RATE_LIMIT_MS
        assert settings.replace_artist_name is False
        assert settings.api_base_url == "https://musicbrainz.org/ws/2"
        assert settings.min_interval == 2.0

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MBRELEASE_SERVER", "http://localhost:5000/")
        monkeypatch.setenv("MBRELEASE_RATE_LIMIT_MS", "250")
        monkeypatch.setenv("MBRELEASE_REPLACE_ARTIST_NAME", "true")

        settings = MBReleaseSettings(_env_file=None)

        assert settings.server == "http://localhost:5000"
        assert settings.rate_limit_ms == 250
        assert settings.replace_artist_name is True
        assert settings.api_base_url == "http://localhost:5000/ws/2"

    def test_public_server_interval_is_raised(self):
        settings = MBReleaseSettings(_env_file=None, server=DEFAULT_SERVER, rate_limit_ms=100)

        assert settings.rate_limit_ms == DEFAULT_RATE_LIMIT_MS
