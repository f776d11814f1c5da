"""Resolution layer for fetching release metadata from the catalog."""

from mbrelease.resolution.decoder import DocumentDecoder, XmlToken, XmlTokenReader
from mbrelease.resolution.dispatcher import (
    DispatcherConfig,
    RateLimitedDispatcher,
    RequestPacer,
)
from mbrelease.resolution.engine import ResolutionEngine
from mbrelease.resolution.mapper import SearchResultMapper

__all__ = [
    # Dispatcher
    "DispatcherConfig",
    "RateLimitedDispatcher",
    "RequestPacer",
    # Decoder
    "DocumentDecoder",
    "XmlToken",
    "XmlTokenReader",
    # Engine
    "ResolutionEngine",
    "SearchResultMapper",
]
