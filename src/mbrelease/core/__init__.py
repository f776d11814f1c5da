"""Core types, models, and utilities."""

from .exceptions import (
    CatalogUnavailableError,
    DocumentDecodeError,
    MBReleaseError,
    ResolutionError,
)
from .identifiers import ExternalId, build_links
from .models import (
    AlbumInfo,
    AlbumMetadata,
    AlbumSearchResult,
    ArtistCredit,
    ArtistSearchResult,
    ReleaseRecord,
    ResolutionQuery,
    TrackInfo,
)
from .types import EntityKind, LookupStrategy, ProviderKey, ResolutionStatus

__all__ = [
    # Types
    "EntityKind",
    "LookupStrategy",
    "ProviderKey",
    "ResolutionStatus",
    # Identifiers
    "ExternalId",
    "build_links",
    # Models
    "AlbumInfo",
    "AlbumMetadata",
    "AlbumSearchResult",
    "ArtistCredit",
    "ArtistSearchResult",
    "ReleaseRecord",
    "ResolutionQuery",
    "TrackInfo",
    # Exceptions
    "CatalogUnavailableError",
    "DocumentDecodeError",
    "MBReleaseError",
    "ResolutionError",
]
