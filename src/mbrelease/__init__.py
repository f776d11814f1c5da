"""mbrelease - MusicBrainz release metadata resolution library."""

from mbrelease.client import MusicBrainzClient, resolve_album, search_album
from mbrelease.config import MBReleaseSettings
from mbrelease.core.models import (
    AlbumInfo,
    AlbumMetadata,
    AlbumSearchResult,
    ArtistCredit,
    ReleaseRecord,
    TrackInfo,
)
from mbrelease.core.types import LookupStrategy, ProviderKey

__version__ = "0.1.0"
__all__ = [
    # Client
    "MusicBrainzClient",
    "resolve_album",
    "search_album",
    "MBReleaseSettings",
    # Types
    "LookupStrategy",
    "ProviderKey",
    # Models
    "AlbumInfo",
    "AlbumMetadata",
    "AlbumSearchResult",
    "ArtistCredit",
    "ReleaseRecord",
    "TrackInfo",
    # Version
    "__version__",
]
