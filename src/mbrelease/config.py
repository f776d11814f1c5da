"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVER = "https://musicbrainz.org"
DEFAULT_RATE_LIMIT_MS = 2000
WEB_SERVICE_PATH = "/ws/2"


def clamp_rate_limit(server: str, rate_limit_ms: int) -> int:
    """Raise the interval to the default when talking to the public server."""
    if server.rstrip("/") == DEFAULT_SERVER and rate_limit_ms < DEFAULT_RATE_LIMIT_MS:
        return DEFAULT_RATE_LIMIT_MS
    return rate_limit_ms


class MBReleaseSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="MBRELEASE_",
    )

    # Catalog server
    server: str = Field(
        default=DEFAULT_SERVER,
        description="MusicBrainz server root (without /ws/2)",
    )
    rate_limit_ms: int = Field(
        default=DEFAULT_RATE_LIMIT_MS,
        ge=0,
        description="Minimum milliseconds between request starts",
    )
    user_agent: str = Field(
        default="mbrelease/0.1.0",
        description="User-Agent sent with every catalog request",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds",
    )

    # Presentation
    replace_artist_name: bool = Field(
        default=False,
        description="Let downstream consumers substitute the credited artist name",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the HTTP API",
    )

    @field_validator("server")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def clamp_public_rate_limit(self) -> Self:
        """Only the shared public server is protected by the default interval."""
        self.rate_limit_ms = clamp_rate_limit(self.server, self.rate_limit_ms)
        return self

    @property
    def api_base_url(self) -> str:
        """Root of the XML web service."""
        return self.server + WEB_SERVICE_PATH

    @property
    def min_interval(self) -> float:
        """Minimum interval between request starts, in seconds."""
        return self.rate_limit_ms / 1000.0


@lru_cache
def get_settings() -> MBReleaseSettings:
    """Get cached settings instance."""
    return MBReleaseSettings()
