"""Tests for mapping release records to search results."""

from __future__ import annotations

from mbrelease.core.models import ArtistCredit, ReleaseRecord
from mbrelease.resolution.mapper import SearchResultMapper


class TestSearchResultMapper:
    """Tests for SearchResultMapper."""

    def test_maps_all_fields(self):
        record = ReleaseRecord(
            release_id="r1",
            release_group_id="g1",
            title="Kid A",
            year=2000,
            overview="ignored by search",
            artists=(
                ArtistCredit(name="Radiohead", artist_id="a1"),
                ArtistCredit(name="Guest", artist_id="a2"),
            ),
        )

        result = SearchResultMapper().to_search_result(record)

        assert result.name == "Kid A"
        assert result.production_year == 2000
        assert result.release_id == "r1"
        assert result.release_group_id == "g1"
        assert result.album_artist.name == "Radiohead"
        assert result.album_artist.artist_id == "a1"
        assert result.album_artist.search_provider_name == "MusicBrainz"
        assert result.search_provider_name == "MusicBrainz"
        assert result.provider_ids == {"MusicBrainzAlbum": "r1", "MusicBrainzReleaseGroup": "g1"}

    def test_no_artists_means_no_album_artist(self):
        result = SearchResultMapper().to_search_result(ReleaseRecord(release_id="r1"))

        assert result.album_artist is None
        assert result.name is None
        assert result.provider_ids == {"MusicBrainzAlbum": "r1"}

    def test_preserves_order_one_to_one(self):
        records = [
            ReleaseRecord(release_id="r3", title=""),
            ReleaseRecord(release_id="r1"),
            ReleaseRecord(release_id="r2", title="Amnesiac"),
        ]

        results = SearchResultMapper().map(records)

        assert [r.release_id for r in results] == ["r3", "r1", "r2"]
        assert results[0].name == ""

    def test_empty_input(self):
        assert SearchResultMapper().map([]) == []
