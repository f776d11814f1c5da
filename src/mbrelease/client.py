"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from mbrelease.config import MBReleaseSettings
from mbrelease.core.exceptions import MBReleaseError
from mbrelease.core.models import AlbumInfo, AlbumMetadata, AlbumSearchResult
from mbrelease.resolution.dispatcher import DispatcherConfig, RateLimitedDispatcher
from mbrelease.resolution.engine import ResolutionEngine

logger = logging.getLogger(__name__)


class MusicBrainzClient:
    """
    Main client for the mbrelease library.

    Owns one dispatcher, so every search and resolution made through the
    same client shares a single request permit and rate limit.

    Usage:
        async with MusicBrainzClient() as client:
            # Candidate releases for an album
            results = await client.search(AlbumInfo(name="OK Computer", album_artists=["Radiohead"]))

            # Release and release-group ids, year and overview
            metadata = await client.resolve(AlbumInfo(name="OK Computer", album_artists=["Radiohead"]))

    Catalog failures are logged and degrade to empty results; cancellation
    is never swallowed. Settings are loaded from environment variables or can
    be passed explicitly.
    """

    def __init__(self, settings: MBReleaseSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or MBReleaseSettings()
        self._dispatcher: RateLimitedDispatcher | None = None
        self._engine: ResolutionEngine | None = None

    async def __aenter__(self) -> MusicBrainzClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    @property
    def settings(self) -> MBReleaseSettings:
        return self._settings

    @property
    def engine(self) -> ResolutionEngine:
        self._ensure_initialized()
        return self._engine

    def _initialize(self) -> None:
        """Initialize client resources."""
        self._dispatcher = RateLimitedDispatcher(DispatcherConfig.from_settings(self._settings))
        self._engine = ResolutionEngine(self._dispatcher)
        logger.info(
            f"MusicBrainz client ready: server={self._settings.server} "
            f"interval={self._settings.rate_limit_ms}ms"
        )

    async def close(self) -> None:
        """Close all resources."""
        if self._dispatcher:
            await self._dispatcher.close()
            self._dispatcher = None
            self._engine = None

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._engine is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with MusicBrainzClient() as client:'"
            )

    async def search(self, info: AlbumInfo) -> list[AlbumSearchResult]:
        """
        Search candidate releases for an album.

        Args:
            info: Known album title, artists and provider ids

        Returns:
            Search results in catalog order; empty if the catalog failed
        """
        self._ensure_initialized()
        try:
            return await self._engine.search(info)
        except MBReleaseError as e:
            logger.exception(f"Release search failed for {info.name!r}: {e.message}")
            return []

    async def resolve(self, info: AlbumInfo) -> AlbumMetadata:
        """
        Resolve release metadata for an album.

        Args:
            info: Known album title, artists and provider ids

        Returns:
            Metadata with ``has_metadata`` set when any id was found;
            empty metadata if the catalog failed
        """
        self._ensure_initialized()
        try:
            return await self._engine.resolve(info)
        except MBReleaseError as e:
            logger.exception(f"Release resolution failed for {info.name!r}: {e.message}")
            return AlbumMetadata()


# Convenience functions for one-off lookups
async def search_album(
    info: AlbumInfo,
    *,
    settings: MBReleaseSettings | None = None,
) -> list[AlbumSearchResult]:
    """
    Search releases for an album (convenience function).

    For multiple lookups, use MusicBrainzClient so they share one rate limit.
    """
    async with MusicBrainzClient(settings) as client:
        return await client.search(info)


async def resolve_album(
    info: AlbumInfo,
    *,
    settings: MBReleaseSettings | None = None,
) -> AlbumMetadata:
    """
    Resolve album metadata (convenience function).

    For multiple lookups, use MusicBrainzClient so they share one rate limit.
    """
    async with MusicBrainzClient(settings) as client:
        return await client.resolve(info)
