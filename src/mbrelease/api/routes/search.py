"""Search endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter

from mbrelease.api.dependencies import Client
from mbrelease.api.schemas import (
    AlbumRequest,
    AlbumSearchResultResponse,
    ArtistResponse,
    SearchAlbumResponse,
)
from mbrelease.core.identifiers import build_links
from mbrelease.core.models import AlbumSearchResult
from mbrelease.core.types import ResolutionStatus

router = APIRouter(prefix="/search", tags=["search"])


def _convert_result(result: AlbumSearchResult, server: str) -> AlbumSearchResultResponse:
    """Convert a domain search result to an API response."""
    artist = None
    if result.album_artist:
        artist = ArtistResponse(
            name=result.album_artist.name,
            artist_id=result.album_artist.artist_id,
            links=build_links(server, artist=result.album_artist.artist_id),
        )

    return AlbumSearchResultResponse(
        name=result.name,
        production_year=result.production_year,
        release_id=result.release_id,
        release_group_id=result.release_group_id,
        album_artist=artist,
        search_provider_name=result.search_provider_name,
        links=build_links(
            server,
            release=result.release_id,
            release_group=result.release_group_id,
        ),
    )


@router.post(
    "/album",
    response_model=SearchAlbumResponse,
    operation_id="searchAlbum",
    summary="Search album releases",
    description="List candidate releases for an album from whatever ids and names are known.",
)
async def search_album(request: AlbumRequest, client: Client) -> SearchAlbumResponse:
    """Search the catalog for releases matching the album."""
    start_time = time.monotonic()

    results = await client.search(request.to_album_info())

    return SearchAlbumResponse(
        status=ResolutionStatus.SUCCESS if results else ResolutionStatus.NOT_FOUND,
        results=[_convert_result(r, client.settings.server) for r in results],
        replace_artist_name=client.settings.replace_artist_name,
        total_duration_ms=(time.monotonic() - start_time) * 1000,
    )
