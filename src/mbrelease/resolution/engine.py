"""Resolution cascade choosing catalog lookups from known identifiers."""

from __future__ import annotations

import logging

from mbrelease.core.models import (
    AlbumInfo,
    AlbumMetadata,
    AlbumSearchResult,
    ReleaseRecord,
    ResolutionQuery,
)
from mbrelease.core.types import LookupStrategy
from mbrelease.resolution import queries
from mbrelease.resolution.decoder import DocumentDecoder
from mbrelease.resolution.dispatcher import RateLimitedDispatcher
from mbrelease.resolution.mapper import SearchResultMapper

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """
    Orchestrates release lookups against the catalog.

    Resolution tries, in order:
    - a known release id (definitive, only the release group is looked up)
    - a known release-group id (first release of the group)
    - an artist id plus album title
    - an artist name plus album title

    Transport and decode errors propagate to the caller. A response the
    server refused (including sustained throttling) counts as "nothing found".
    """

    def __init__(
        self,
        dispatcher: RateLimitedDispatcher,
        decoder: DocumentDecoder | None = None,
        mapper: SearchResultMapper | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._decoder = decoder or DocumentDecoder()
        self._mapper = mapper or SearchResultMapper()

    # Search listing

    async def search(self, info: AlbumInfo) -> list[AlbumSearchResult]:
        """List candidate releases for the album."""
        path = self.search_path(info)
        records = await self.fetch_releases(path)
        return self._mapper.map(records)

    @staticmethod
    def search_path(info: AlbumInfo) -> str:
        """Pick the single query used for a search listing."""
        if release_id := info.release_id():
            return queries.release_search_by_release_id(release_id)

        if release_group_id := info.release_group_id():
            return queries.releases_in_release_group(release_group_id)

        if artist_id := info.artist_id():
            return queries.release_search_by_artist_id(info.name, artist_id)

        return queries.release_search_by_artist_name(info.name, info.album_artist())

    # Metadata resolution

    async def resolve(self, info: AlbumInfo) -> AlbumMetadata:
        """Resolve release identifiers, year and overview for the album."""
        return await self.resolve_query(ResolutionQuery.from_album_info(info))

    async def resolve_query(self, query: ResolutionQuery) -> AlbumMetadata:
        if not query.is_constructible:
            logger.debug("Nothing to look up: no ids and no artist/album pair")
            return AlbumMetadata()

        release_id = query.release_id
        release_group_id = query.release_group_id
        year: int | None = None
        overview: str | None = None
        strategy = LookupStrategy.RELEASE_ID if release_id else LookupStrategy.NONE

        if not release_id and release_group_id:
            strategy = LookupStrategy.RELEASE_GROUP_ID
            release_id = await self.release_id_for_release_group(release_group_id)

        if not release_id:
            record, artist_strategy = await self._find_by_artist(query)
            if artist_strategy is not LookupStrategy.NONE:
                strategy = artist_strategy
            if record is not None:
                release_id = record.release_id or release_id
                release_group_id = record.release_group_id or release_group_id
                year = record.year
                overview = record.overview

        if release_id and not release_group_id:
            release_group_id = await self.release_group_id_for_release(release_id)

        has_metadata = bool(release_id or release_group_id)
        logger.debug(
            f"Resolved via {strategy}: release={release_id} "
            f"release_group={release_group_id} has_metadata={has_metadata}"
        )

        return AlbumMetadata(
            has_metadata=has_metadata,
            release_id=release_id,
            release_group_id=release_group_id,
            year=year,
            overview=overview,
            strategy=strategy,
        )

    async def _find_by_artist(
        self,
        query: ResolutionQuery,
    ) -> tuple[ReleaseRecord | None, LookupStrategy]:
        """Exact album-title search scoped by artist id, else by artist name."""
        if query.artist_id:
            path = queries.release_search_by_artist_id(query.album_name or "", query.artist_id)
            strategy = LookupStrategy.ARTIST_ID
        elif query.artist_name and query.album_name:
            path = queries.release_search_by_artist_name(query.album_name, query.artist_name)
            strategy = LookupStrategy.ARTIST_NAME
        else:
            return None, LookupStrategy.NONE

        records = await self.fetch_releases(path)
        return (records[0] if records else None), strategy

    async def release_id_for_release_group(self, release_group_id: str) -> str | None:
        """First release of a release group."""
        records = await self.fetch_releases(queries.releases_in_release_group(release_group_id))
        return records[0].release_id if records else None

    async def release_group_id_for_release(self, release_id: str) -> str | None:
        """Release group a release belongs to."""
        path = queries.release_group_search_by_release_id(release_id)
        async with self._dispatcher.stream(path) as response:
            if not response.is_success:
                self._log_unusable(response.status_code, path)
                return None
            return await self._decoder.first_release_group_id(response.aiter_bytes())

    # Fetching

    async def fetch_releases(self, path: str) -> list[ReleaseRecord]:
        """Fetch a release document and decode it while it streams in."""
        async with self._dispatcher.stream(path) as response:
            if not response.is_success:
                self._log_unusable(response.status_code, path)
                return []
            return await self._decoder.decode(response.aiter_bytes())

    @staticmethod
    def _log_unusable(status_code: int, path: str) -> None:
        logger.warning(f"Catalog answered {status_code} for {path}; treating as no results")
