"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mbrelease import __version__
from mbrelease.api.routes import health_router, resolve_router, search_router
from mbrelease.client import MusicBrainzClient
from mbrelease.config import MBReleaseSettings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Opens the shared MusicBrainz client on startup and closes it on shutdown.
    All requests served by the app go through that client's single dispatcher.
    """
    settings: MBReleaseSettings = app.state.settings

    logging.getLogger("mbrelease").setLevel(settings.log_level.upper())

    logger.info("Initializing MusicBrainz client...")
    async with MusicBrainzClient(settings) as client:
        app.state.musicbrainz_client = client
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        app.state.musicbrainz_client = None

    logger.info("Application shutdown complete")


def create_app(
    *,
    settings: MBReleaseSettings | None = None,
    title: str = "mbrelease API",
    description: str = "MusicBrainz release search and metadata resolution API",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings; loaded from the environment if omitted
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
