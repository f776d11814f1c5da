"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from mbrelease.client import MusicBrainzClient


async def get_musicbrainz_client(request: Request) -> MusicBrainzClient:
    """Get the shared MusicBrainz client from app state."""
    client = getattr(request.app.state, "musicbrainz_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="MusicBrainz client not initialized")
    return client


# Type alias for cleaner dependency injection
Client = Annotated[MusicBrainzClient, Depends(get_musicbrainz_client)]
