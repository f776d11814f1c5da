"""Resolution endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter

from mbrelease.api.dependencies import Client
from mbrelease.api.schemas import AlbumRequest, ResolveAlbumResponse
from mbrelease.core.identifiers import build_links
from mbrelease.core.types import ResolutionStatus

router = APIRouter(prefix="/resolve", tags=["resolve"])


@router.post(
    "/album",
    response_model=ResolveAlbumResponse,
    operation_id="resolveAlbum",
    summary="Resolve album metadata",
    description=(
        "Resolve release and release-group ids, year and overview from a release id, "
        "release-group id, artist id, or artist name plus album title."
    ),
)
async def resolve_album(request: AlbumRequest, client: Client) -> ResolveAlbumResponse:
    """Resolve album metadata from the catalog."""
    start_time = time.monotonic()

    metadata = await client.resolve(request.to_album_info())

    return ResolveAlbumResponse(
        status=ResolutionStatus.SUCCESS if metadata.has_metadata else ResolutionStatus.NOT_FOUND,
        has_metadata=metadata.has_metadata,
        release_id=metadata.release_id,
        release_group_id=metadata.release_group_id,
        year=metadata.year,
        overview=metadata.overview,
        strategy=metadata.strategy,
        provider_ids=metadata.provider_ids,
        links=build_links(
            client.settings.server,
            release=metadata.release_id,
            release_group=metadata.release_group_id,
        ),
        total_duration_ms=(time.monotonic() - start_time) * 1000,
    )
