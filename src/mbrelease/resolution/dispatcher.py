"""Serialized, rate-limited HTTP access to the catalog web service."""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, AsyncIterator, ClassVar

import httpx

from mbrelease.config import (
    DEFAULT_RATE_LIMIT_MS,
    DEFAULT_SERVER,
    WEB_SERVICE_PATH,
    clamp_rate_limit,
)
from mbrelease.core.exceptions import CatalogUnavailableError

if TYPE_CHECKING:
    from mbrelease.config import MBReleaseSettings

logger = logging.getLogger(__name__)


@dataclass
class DispatcherConfig:
    """Configuration for the request dispatcher."""

    server: str = DEFAULT_SERVER
    rate_limit_ms: int = DEFAULT_RATE_LIMIT_MS
    max_attempts: int = 5
    timeout: float = 30.0
    user_agent: str = "mbrelease/0.1.0"

    def __post_init__(self) -> None:
        self.server = self.server.rstrip("/")
        self.rate_limit_ms = clamp_rate_limit(self.server, self.rate_limit_ms)

    @property
    def base_url(self) -> str:
        return self.server + WEB_SERVICE_PATH

    @property
    def min_interval(self) -> float:
        return self.rate_limit_ms / 1000.0

    @classmethod
    def from_settings(cls, settings: MBReleaseSettings) -> DispatcherConfig:
        return cls(
            server=settings.server,
            rate_limit_ms=settings.rate_limit_ms,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )


class RequestPacer:
    """
    Single request permit plus the time of the last request start.

    Holding ``permit`` serializes requests; ``wait`` suspends until the
    minimum interval since the last ``mark_start`` has passed.
    """

    def __init__(self, min_interval: float) -> None:
        self.min_interval = min_interval
        self.permit = asyncio.Lock()
        self._last_start: float | None = None

    def elapsed(self) -> float | None:
        """Seconds since the last request started, or None before the first one."""
        if self._last_start is None:
            return None
        return time.monotonic() - self._last_start

    async def wait(self) -> None:
        """Sleep for whatever remains of the minimum interval."""
        elapsed = self.elapsed()
        if elapsed is not None and elapsed < self.min_interval:
            await asyncio.sleep(self.min_interval - elapsed)

    def mark_start(self) -> float | None:
        """Reset the tracker and return the gap that preceded this request."""
        gap = self.elapsed()
        self._last_start = time.monotonic()
        return gap


class RateLimitedDispatcher:
    """
    Issues GET requests against the catalog one at a time.

    Provides:
    - A process-wide permit so at most one request is in flight
    - A minimum interval between request starts
    - In-place retries while the server answers 503 (throttled)

    Any other status, and any transport error, is returned or raised
    after the first attempt.
    """

    SOURCE_NAME: ClassVar[str] = "musicbrainz"
    THROTTLED_STATUS: ClassVar[int] = 503

    def __init__(self, config: DispatcherConfig | None = None) -> None:
        self.config = config or DispatcherConfig()
        self._client: httpx.AsyncClient | None = None
        self._pacer = RequestPacer(self.config.min_interval)

    @property
    def pacer(self) -> RequestPacer:
        return self._pacer

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise CatalogUnavailableError(
                message=f"HTTP error: {e}",
                source=self.SOURCE_NAME,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/xml",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @asynccontextmanager
    async def stream(self, path: str) -> AsyncIterator[httpx.Response]:
        """
        Perform ``GET base_url + path`` and yield the open response.

        The permit is held until the body has been consumed and the
        response closed, so reading the stream counts as part of the request.

        Args:
            path: Service-relative path including its query string

        Yields:
            The final response; after exhausted retries this is still the
            throttled one
        """
        url = self.config.base_url + path

        async with self._pacer.permit:
            response = await self._send_with_retries(url)
            try:
                yield response
            except httpx.HTTPError as e:
                raise CatalogUnavailableError(
                    message=f"HTTP error while reading response: {e}",
                    source=self.SOURCE_NAME,
                    status_code=response.status_code,
                ) from e
            finally:
                await response.aclose()

    async def fetch(self, path: str) -> httpx.Response:
        """Perform the request and read the whole body before returning."""
        async with self.stream(path) as response:
            await response.aread()
            return response

    async def _send_with_retries(self, url: str) -> httpx.Response:
        attempts = 0

        async with self._get_client() as client:
            while True:
                attempts += 1
                await self._pacer.wait()

                gap = self._pacer.mark_start()
                if gap is None:
                    logger.debug(f"Requesting {url} (first request)")
                else:
                    logger.debug(
                        f"Requesting {url}; time since previous request: {gap * 1000:.0f} ms"
                    )

                request = client.build_request("GET", url)
                response = await client.send(request, stream=True)

                if response.status_code != self.THROTTLED_STATUS:
                    break
                if attempts >= self.config.max_attempts:
                    break

                logger.warning(
                    f"Throttled (503) on attempt {attempts}/{self.config.max_attempts} "
                    f"for {url}, retrying"
                )
                await response.aclose()

        if response.status_code == self.THROTTLED_STATUS:
            logger.error(
                f"503 Service Unavailable (throttled) response received {attempts} times "
                f"whilst requesting {url}"
            )

        return response

    async def __aenter__(self) -> RateLimitedDispatcher:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
