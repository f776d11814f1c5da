"""Domain models for releases, album criteria and resolution results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import LookupStrategy, ProviderKey


def _first_non_empty(values: list[str | None]) -> str | None:
    return next((v for v in values if v), None)


class ArtistCredit(BaseModel):
    """A credited artist as it appears on a release."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Artist display name")
    artist_id: str | None = Field(default=None, description="MusicBrainz artist id")


class ReleaseRecord(BaseModel):
    """One release entry decoded from a catalog document."""

    model_config = ConfigDict(frozen=True)

    release_id: str = Field(..., description="MusicBrainz release id")
    release_group_id: str | None = Field(default=None, description="Release-group id")
    title: str | None = Field(default=None, description="Release title")
    overview: str | None = Field(default=None, description="Release annotation")
    year: int | None = Field(default=None, description="Year of the release date")
    artists: tuple[ArtistCredit, ...] = Field(
        default=(), description="Credited artists in document order"
    )

    @property
    def primary_artist(self) -> ArtistCredit | None:
        """Return the first credited artist, if any."""
        return self.artists[0] if self.artists else None


class TrackInfo(BaseModel):
    """A track belonging to the album being looked up."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    album_artists: list[str] = Field(default_factory=list)
    provider_ids: dict[str, str] = Field(default_factory=dict)

    def get_provider_id(self, key: ProviderKey) -> str | None:
        return self.provider_ids.get(key.value) or None


class AlbumInfo(BaseModel):
    """
    Partial identifying information for an album.

    Identifiers may live on the album itself or on any of its tracks;
    the accessor methods apply the same fallback order the host uses.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Album title")
    year: int | None = Field(default=None, description="Known production year")
    album_artists: list[str] = Field(default_factory=list)
    provider_ids: dict[str, str] = Field(default_factory=dict)
    artist_provider_ids: dict[str, str] = Field(default_factory=dict)
    tracks: list[TrackInfo] = Field(default_factory=list)

    def get_provider_id(self, key: ProviderKey) -> str | None:
        return self.provider_ids.get(key.value) or None

    def _from_tracks(self, key: ProviderKey) -> str | None:
        return _first_non_empty([t.get_provider_id(key) for t in self.tracks])

    def release_id(self) -> str | None:
        """Album release id, else the first one found on a track."""
        return self.get_provider_id(ProviderKey.MUSICBRAINZ_ALBUM) or self._from_tracks(
            ProviderKey.MUSICBRAINZ_ALBUM
        )

    def release_group_id(self) -> str | None:
        """Album release-group id, else the first one found on a track."""
        return self.get_provider_id(ProviderKey.MUSICBRAINZ_RELEASE_GROUP) or self._from_tracks(
            ProviderKey.MUSICBRAINZ_RELEASE_GROUP
        )

    def artist_id(self) -> str | None:
        """Album-artist id, else the artist id, else the first track album-artist id."""
        return (
            self.get_provider_id(ProviderKey.MUSICBRAINZ_ALBUM_ARTIST)
            or self.artist_provider_ids.get(ProviderKey.MUSICBRAINZ_ARTIST.value)
            or self._from_tracks(ProviderKey.MUSICBRAINZ_ALBUM_ARTIST)
        )

    def album_artist(self) -> str:
        """First non-empty track album-artist, else the album's first album-artist."""
        from_tracks = _first_non_empty([a for t in self.tracks for a in t.album_artists])
        if from_tracks:
            return from_tracks
        return self.album_artists[0] if self.album_artists else ""


class ResolutionQuery(BaseModel):
    """What is known about an album before any lookup is made."""

    model_config = ConfigDict(frozen=True)

    release_id: str | None = None
    release_group_id: str | None = None
    artist_id: str | None = None
    artist_name: str | None = None
    album_name: str | None = None

    @classmethod
    def from_album_info(cls, info: AlbumInfo) -> ResolutionQuery:
        return cls(
            release_id=info.release_id(),
            release_group_id=info.release_group_id(),
            artist_id=info.artist_id(),
            artist_name=info.album_artist() or None,
            album_name=info.name or None,
        )

    @property
    def is_constructible(self) -> bool:
        """Whether any lookup can be made from this query."""
        return bool(
            self.release_id
            or self.release_group_id
            or self.artist_id
            or (self.artist_name and self.album_name)
        )


class AlbumMetadata(BaseModel):
    """Outcome of resolving an album."""

    has_metadata: bool = False
    release_id: str | None = None
    release_group_id: str | None = None
    year: int | None = None
    overview: str | None = None
    strategy: LookupStrategy = LookupStrategy.NONE

    @property
    def provider_ids(self) -> dict[str, str]:
        """Discovered ids keyed the way the host stores them."""
        if not self.has_metadata:
            return {}
        ids: dict[str, str] = {}
        if self.release_id:
            ids[ProviderKey.MUSICBRAINZ_ALBUM.value] = self.release_id
        if self.release_group_id:
            ids[ProviderKey.MUSICBRAINZ_RELEASE_GROUP.value] = self.release_group_id
        return ids


class ArtistSearchResult(BaseModel):
    """Nested artist entry of a search result."""

    name: str | None = None
    artist_id: str | None = None
    search_provider_name: str = "MusicBrainz"


class AlbumSearchResult(BaseModel):
    """One release offered as a search candidate."""

    name: str | None = None
    production_year: int | None = None
    release_id: str | None = None
    release_group_id: str | None = None
    album_artist: ArtistSearchResult | None = None
    search_provider_name: str = "MusicBrainz"

    @property
    def provider_ids(self) -> dict[str, str]:
        ids: dict[str, str] = {}
        if self.release_id:
            ids[ProviderKey.MUSICBRAINZ_ALBUM.value] = self.release_id
        if self.release_group_id:
            ids[ProviderKey.MUSICBRAINZ_RELEASE_GROUP.value] = self.release_group_id
        return ids
