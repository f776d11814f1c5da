"""Conversion of decoded releases into search results."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from mbrelease.core.models import AlbumSearchResult, ArtistSearchResult, ReleaseRecord


class SearchResultMapper:
    """Maps each release record to exactly one search result, preserving order."""

    PROVIDER_NAME: ClassVar[str] = "MusicBrainz"

    def to_search_result(self, record: ReleaseRecord) -> AlbumSearchResult:
        album_artist = None
        if primary := record.primary_artist:
            album_artist = ArtistSearchResult(
                name=primary.name,
                artist_id=primary.artist_id,
                search_provider_name=self.PROVIDER_NAME,
            )

        return AlbumSearchResult(
            name=record.title,
            production_year=record.year,
            release_id=record.release_id,
            release_group_id=record.release_group_id,
            album_artist=album_artist,
            search_provider_name=self.PROVIDER_NAME,
        )

    def map(self, records: Iterable[ReleaseRecord]) -> list[AlbumSearchResult]:
        return [self.to_search_result(record) for record in records]
