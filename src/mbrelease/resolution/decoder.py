"""Streaming decoder for release search and lookup documents.

The response body is fed chunk by chunk into an incremental XML parser and
walked forward-only. Each nesting level (list, release, artist-credit,
name-credit, artist) has its own helper that reads the children it knows,
skips everything else with its descendants, and returns once its element
closes. Elements are dropped from the partial tree as soon as they close,
so memory stays bounded by the nesting depth rather than the document size.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import AsyncIterable, AsyncIterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from xml.etree.ElementTree import Element, ParseError, XMLPullParser

from mbrelease.core.exceptions import DocumentDecodeError
from mbrelease.core.models import ArtistCredit, ReleaseRecord

logger = logging.getLogger(__name__)

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y")


@dataclass(slots=True)
class XmlToken:
    """A start or end tag with its local name."""

    kind: Literal["start", "end"]
    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    text: str | None = None


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


async def _single_chunk(data: bytes) -> AsyncIterator[bytes]:
    yield data


class XmlTokenReader:
    """
    Pull-style reader over an async stream of document bytes.

    Comments and processing instructions never surface as tokens, and
    nothing is validated against a schema.
    """

    def __init__(self, chunks: AsyncIterable[bytes]) -> None:
        self._chunks = aiter(chunks)
        self._parser = XMLPullParser(events=("start", "end"))
        self._pending: deque[tuple[str, Element]] = deque()
        self._open: list[Element] = []
        self._exhausted = False

    async def _fill(self) -> bool:
        """Feed chunks until at least one event is pending; False at end of document."""
        while not self._pending:
            if self._exhausted:
                return False
            try:
                chunk = await anext(self._chunks)
            except StopAsyncIteration:
                self._exhausted = True
                self._close_parser()
            else:
                self._feed(chunk)
        return True

    def _feed(self, chunk: bytes) -> None:
        try:
            self._parser.feed(chunk)
            self._pending.extend(self._parser.read_events())
        except ParseError as e:
            raise DocumentDecodeError(f"Malformed document: {e}", position=e.position) from e

    def _close_parser(self) -> None:
        try:
            self._parser.close()
            self._pending.extend(self._parser.read_events())
        except ParseError as e:
            raise DocumentDecodeError(f"Truncated document: {e}", position=e.position) from e

    async def read(self) -> XmlToken | None:
        """Return the next token, or None once the document is exhausted."""
        if not await self._fill():
            return None

        event, elem = self._pending.popleft()
        name = _local_name(elem.tag)

        if event == "start":
            self._open.append(elem)
            return XmlToken("start", name, dict(elem.attrib))

        text = elem.text
        self._open.pop()
        if self._open:
            self._open[-1].remove(elem)
        elem.clear()
        return XmlToken("end", name, text=text)

    async def _read_required(self) -> XmlToken:
        token = await self.read()
        if token is None:
            raise DocumentDecodeError("Unexpected end of document")
        return token

    async def next_child(self) -> XmlToken | None:
        """
        Advance to the next child start tag of the current element.

        Returns None, having consumed the end tag, when the current
        element closes. A self-closing element therefore yields no
        children and never desynchronizes its siblings.
        """
        token = await self._read_required()
        if token.kind == "end":
            return None
        return token

    async def skip(self) -> None:
        """Consume the rest of the element whose start tag was just read."""
        depth = 1
        while depth:
            token = await self._read_required()
            depth += 1 if token.kind == "start" else -1

    async def finish(self) -> None:
        """Skip all remaining children of the current element, including its end tag."""
        while await self.next_child() is not None:
            await self.skip()

    async def read_text(self) -> str:
        """Consume the element whose start tag was just read and return its text."""
        depth = 1
        text: str | None = None
        while depth:
            token = await self._read_required()
            if token.kind == "start":
                depth += 1
            else:
                depth -= 1
                if depth == 0:
                    text = token.text
        return text or ""


def parse_year(value: str) -> int | None:
    """Year of a full or partial ISO date, or None if it doesn't parse."""
    value = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).year
        except ValueError:
            continue
    return None


class DocumentDecoder:
    """
    Decodes catalog XML into release records.

    Stateless: each call owns its own reader, so one decoder may be
    shared by concurrent callers.
    """

    async def decode(self, source: AsyncIterable[bytes] | bytes) -> list[ReleaseRecord]:
        """
        Decode every ``release`` inside the document's ``release-list``.

        Args:
            source: The response body as an async chunk stream, or bytes

        Returns:
            Records in document order; empty when there is no release-list

        Raises:
            DocumentDecodeError: If the stream is malformed or truncated
        """
        reader = self._reader(source)
        if await reader.read() is None:
            return []

        while (child := await reader.next_child()) is not None:
            if child.name == "release-list":
                return await _read_release_list(reader)
            await reader.skip()

        return []

    async def first_release_group_id(self, source: AsyncIterable[bytes] | bytes) -> str | None:
        """Return the ``id`` of the first ``release-group`` in a ``release-group-list``."""
        reader = self._reader(source)
        if await reader.read() is None:
            return None

        while (child := await reader.next_child()) is not None:
            if child.name == "release-group-list":
                while (group := await reader.next_child()) is not None:
                    if group.name == "release-group":
                        return group.attrs.get("id")
                    await reader.skip()
                return None
            await reader.skip()

        return None

    @staticmethod
    def _reader(source: AsyncIterable[bytes] | bytes) -> XmlTokenReader:
        if isinstance(source, (bytes, bytearray)):
            source = _single_chunk(bytes(source))
        return XmlTokenReader(source)


async def _read_release_list(reader: XmlTokenReader) -> list[ReleaseRecord]:
    records: list[ReleaseRecord] = []

    while (child := await reader.next_child()) is not None:
        if child.name != "release":
            await reader.skip()
            continue

        release_id = child.attrs.get("id")
        if release_id is None:
            logger.debug("Skipping release without id")
            await reader.skip()
            continue

        record = await _read_release(reader, release_id)
        if record is None:
            logger.debug(f"Skipping empty release {release_id}")
            continue
        records.append(record)

    return records


async def _read_release(reader: XmlTokenReader, release_id: str) -> ReleaseRecord | None:
    # A release without child elements carries nothing to resolve.
    fields: dict[str, object] = {"release_id": release_id}
    artists: list[ArtistCredit] = []
    has_children = False

    while (child := await reader.next_child()) is not None:
        has_children = True
        match child.name:
            case "title":
                fields["title"] = await reader.read_text()
            case "date":
                year = parse_year(await reader.read_text())
                if year is not None:
                    fields["year"] = year
            case "annotation":
                fields["overview"] = await reader.read_text()
            case "release-group":
                fields["release_group_id"] = child.attrs.get("id")
                await reader.skip()
            case "artist-credit":
                credit = await _read_artist_credit(reader)
                if credit is not None and credit.name:
                    artists.append(credit)
            case _:
                await reader.skip()

    if not has_children:
        return None

    return ReleaseRecord(**fields, artists=tuple(artists))


async def _read_artist_credit(reader: XmlTokenReader) -> ArtistCredit | None:
    # Primary artist only: the first name-credit decides.
    while (child := await reader.next_child()) is not None:
        if child.name == "name-credit":
            credit = await _read_name_credit(reader)
            await reader.finish()
            return credit
        await reader.skip()
    return None


async def _read_name_credit(reader: XmlTokenReader) -> ArtistCredit | None:
    while (child := await reader.next_child()) is not None:
        if child.name == "artist":
            artist_id = child.attrs.get("id")
            if artist_id is None:
                await reader.skip()
                credit = None
            else:
                credit = await _read_artist(reader, artist_id)
            await reader.finish()
            return credit
        await reader.skip()
    return None


async def _read_artist(reader: XmlTokenReader, artist_id: str) -> ArtistCredit:
    name: str | None = None

    while (child := await reader.next_child()) is not None:
        if child.name == "name":
            name = await reader.read_text()
        else:
            await reader.skip()

    return ArtistCredit(name=name, artist_id=artist_id)
