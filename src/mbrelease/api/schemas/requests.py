"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from mbrelease.api.schemas.base import APIBaseSchema
from mbrelease.core.models import AlbumInfo, TrackInfo


class TrackRequest(APIBaseSchema):
    """A track of the album being looked up."""

    name: Annotated[str | None, Field(default=None, max_length=500)]

    album_artists: Annotated[
        list[str],
        Field(default_factory=list, description="Album artists tagged on the track."),
    ]

    provider_ids: Annotated[
        dict[str, str],
        Field(
            default_factory=dict,
            description="Provider ids keyed like MusicBrainzAlbum, MusicBrainzAlbumArtist.",
        ),
    ]

    def to_track_info(self) -> TrackInfo:
        return TrackInfo(
            name=self.name,
            album_artists=self.album_artists,
            provider_ids=self.provider_ids,
        )


class AlbumRequest(APIBaseSchema):
    """Whatever is already known about an album."""

    name: Annotated[
        str,
        Field(default="", max_length=500, description="Album title."),
    ]

    year: Annotated[
        int | None,
        Field(default=None, ge=1000, le=2100, description="Known production year."),
    ]

    album_artists: Annotated[
        list[str],
        Field(default_factory=list, description="Album-level artist names."),
    ]

    provider_ids: Annotated[
        dict[str, str],
        Field(
            default_factory=dict,
            description="Album provider ids (MusicBrainzAlbum, MusicBrainzReleaseGroup, ...).",
        ),
    ]

    artist_provider_ids: Annotated[
        dict[str, str],
        Field(default_factory=dict, description="Artist provider ids (MusicBrainzArtist)."),
    ]

    tracks: Annotated[
        list[TrackRequest],
        Field(default_factory=list, max_length=500, description="Tracks of the album."),
    ]

    def to_album_info(self) -> AlbumInfo:
        return AlbumInfo(
            name=self.name,
            year=self.year,
            album_artists=self.album_artists,
            provider_ids=self.provider_ids,
            artist_provider_ids=self.artist_provider_ids,
            tracks=[t.to_track_info() for t in self.tracks],
        )
