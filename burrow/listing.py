"""Listing parser: raw response bytes to typed items.

Parsing is all-or-nothing. The first malformed line raises and no items are
returned for the response.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import DecodeError, MalformedListingError
from .item_types import ItemKind, kind_for_code
from .location import Location, parse_port

LINE_SEPARATOR = "\r\n"
FIELD_SEPARATOR = "\t"
END_OF_LISTING = "."
# Counted in UTF-8 bytes: type code, three separators, and room for non-empty fields.
MIN_LINE_LENGTH = 8


@dataclass(frozen=True)
class Item:
    """One entry of a listing."""

    kind: ItemKind
    display: str
    selector: str
    host: str
    port: int

    @property
    def location(self) -> Location:
        return Location(self.host, self.port, self.selector)


def _parse_line(line: str) -> Item:
    if len(line.encode("utf-8")) < MIN_LINE_LENGTH:
        raise MalformedListingError(f"Malformed listing element:\n  `{line}'")
    kind = kind_for_code(line[0])
    fields = line[1:].split(FIELD_SEPARATOR)
    if len(fields) != 4:
        raise MalformedListingError(
            f"Malformed listing element:\n  `{FIELD_SEPARATOR.join(fields)}'"
        )
    display, selector, host, raw_port = fields
    try:
        port = parse_port(raw_port)
    except ValueError:
        raise MalformedListingError(f"Invalid port number: {raw_port}") from None
    return Item(kind=kind, display=display, selector=selector, host=host, port=port)


def parse_listing(raw: bytes) -> list[Item]:
    """Decode a listing response into items, in line order."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodeError("UTF8-invalid data") from None

    return [
        _parse_line(line)
        for line in text.split(LINE_SEPARATOR)
        if line and line != END_OF_LISTING
    ]


def selectable_items(items: Iterable[Item]) -> list[Item]:
    """Return the items that receive labels, keeping listing order."""
    return [item for item in items if item.kind.selectable]


def item_for_ordinal(items: Sequence[Item], ordinal: int) -> Item | None:
    """Return the ``ordinal``-th selectable item, or ``None`` past the end."""
    candidates = selectable_items(items)
    if 0 <= ordinal < len(candidates):
        return candidates[ordinal]
    return None
