"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from mbrelease.api.schemas.base import APIBaseSchema
from mbrelease.core.types import LookupStrategy, ResolutionStatus


class ArtistResponse(APIBaseSchema):
    """Primary credited artist of a release."""

    name: str | None = None
    artist_id: str | None = None
    links: dict[str, str] = Field(default_factory=dict)


class AlbumSearchResultResponse(APIBaseSchema):
    """One candidate release."""

    name: str | None = None
    production_year: int | None = None
    release_id: str | None = None
    release_group_id: str | None = None
    album_artist: ArtistResponse | None = None
    search_provider_name: str
    links: dict[str, str] = Field(default_factory=dict)


class SearchAlbumResponse(APIBaseSchema):
    """Response for an album search."""

    status: ResolutionStatus
    results: list[AlbumSearchResultResponse]
    replace_artist_name: bool
    total_duration_ms: float


class ResolveAlbumResponse(APIBaseSchema):
    """Response for album metadata resolution."""

    status: ResolutionStatus
    has_metadata: bool
    release_id: str | None = None
    release_group_id: str | None = None
    year: int | None = None
    overview: str | None = None
    strategy: LookupStrategy
    provider_ids: dict[str, str] = Field(default_factory=dict)
    links: dict[str, str] = Field(default_factory=dict)
    total_duration_ms: float


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
