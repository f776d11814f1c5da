"""MusicBrainz identifier value objects and browsable links."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import EntityKind


class ExternalId(BaseModel):
    """A MusicBrainz id (MBID) of a given entity kind."""

    model_config = ConfigDict(frozen=True)

    kind: EntityKind
    value: str = Field(..., description="Lowercase MBID (UUID form)")

    MBID_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
    )

    @field_validator("value", mode="before")
    @classmethod
    def normalize_mbid(cls, v: str) -> str:
        """Strip whitespace, lowercase and check the UUID shape."""
        v = str(v).strip().lower()
        if not cls.MBID_PATTERN.match(v):
            raise ValueError(f"Invalid MBID: {v!r}")
        return v

    @classmethod
    def parse(cls, kind: EntityKind, value: str) -> ExternalId:
        return cls(kind=kind, value=value)

    def url(self, server: str) -> str:
        """Return the entity page on the given server."""
        return f"{server.rstrip('/')}/{self.kind.value}/{self.value}"

    def __str__(self) -> str:
        return self.value


def build_links(server: str, **ids: str | None) -> dict[str, str]:
    """
    Build browsable links for whichever ids are valid MBIDs.

    Keyword names are entity kinds with ``_`` in place of ``-``
    (``release``, ``release_group``, ``artist``, ``track``). Missing or
    malformed ids are left out.
    """
    links: dict[str, str] = {}
    for name, value in ids.items():
        if not value:
            continue
        kind = EntityKind(name.replace("_", "-"))
        try:
            external_id = ExternalId.parse(kind, value)
        except ValueError:
            continue
        links[name] = external_id.url(server)
    return links
