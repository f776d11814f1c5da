"""Custom exception hierarchy for mbrelease."""

from typing import Any


class MBReleaseError(Exception):
    """Base exception for all mbrelease errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResolutionError(MBReleaseError):
    """Failed to resolve release metadata."""

    pass


class CatalogUnavailableError(ResolutionError):
    """The catalog service could not be reached."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class DocumentDecodeError(MBReleaseError):
    """A response body was not a well-formed document."""

    def __init__(
        self,
        message: str,
        position: tuple[int, int] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.position = position
