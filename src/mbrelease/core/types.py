"""Core enums and type definitions."""

from enum import StrEnum


class ProviderKey(StrEnum):
    """Provider-id keys understood on album and track criteria."""

    MUSICBRAINZ_ALBUM = "MusicBrainzAlbum"
    MUSICBRAINZ_RELEASE_GROUP = "MusicBrainzReleaseGroup"
    MUSICBRAINZ_ARTIST = "MusicBrainzArtist"
    MUSICBRAINZ_ALBUM_ARTIST = "MusicBrainzAlbumArtist"
    MUSICBRAINZ_TRACK = "MusicBrainzTrack"


class LookupStrategy(StrEnum):
    """Which known identifier drove a resolution."""

    RELEASE_ID = "release_id"
    RELEASE_GROUP_ID = "release_group_id"
    ARTIST_ID = "artist_id"
    ARTIST_NAME = "artist_name"
    NONE = "none"


class ResolutionStatus(StrEnum):
    """Status of a resolution attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"


class EntityKind(StrEnum):
    """Catalog entity kinds that can be linked to."""

    RELEASE = "release"
    RELEASE_GROUP = "release-group"
    ARTIST = "artist"
    TRACK = "track"
