"""Service-relative request paths for the release lookups.

Every dynamic value is percent-encoded. Values embedded in a quoted
phrase lose their double quotes first so they cannot close the phrase
early (e.g. 12" singles).
"""

from __future__ import annotations

from urllib.parse import quote_plus


def _encode(value: str) -> str:
    return quote_plus(value)


def _phrase(value: str) -> str:
    return '"' + _encode(value.replace('"', "")) + '"'


def release_search_by_release_id(release_id: str) -> str:
    return "/release/?query=reid:" + _encode(release_id)


def releases_in_release_group(release_group_id: str) -> str:
    return "/release?release-group=" + _encode(release_group_id)


def release_group_search_by_release_id(release_id: str) -> str:
    return "/release-group/?query=reid:" + _encode(release_id)


def release_search_by_artist_id(album_name: str, artist_id: str) -> str:
    return f"/release/?query={_phrase(album_name)} AND arid:{_encode(artist_id)}"


def release_search_by_artist_name(album_name: str, artist_name: str) -> str:
    return f"/release/?query={_phrase(album_name)} AND artist:{_phrase(artist_name)}"
