"""API schema definitions."""

from mbrelease.api.schemas.base import APIBaseSchema
from mbrelease.api.schemas.requests import (
    AlbumRequest,
    TrackRequest,
)
from mbrelease.api.schemas.responses import (
    AlbumSearchResultResponse,
    ArtistResponse,
    HealthResponse,
    ResolveAlbumResponse,
    SearchAlbumResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "AlbumRequest",
    "TrackRequest",
    # Responses
    "AlbumSearchResultResponse",
    "ArtistResponse",
    "HealthResponse",
    "ResolveAlbumResponse",
    "SearchAlbumResponse",
]
