"""Closed set of listing item kinds and their dispatch categories.

The one-character wire codes are fixed. An unknown code is rejected while
parsing, so every dispatch site only ever sees a member of ``ItemKind``.
"""

from __future__ import annotations

from enum import Enum, auto

from .errors import MalformedListingError


class Category(Enum):
    """How the dispatcher treats a selected item."""

    CONTENT = auto()
    CONTAINER = auto()
    SERVICE = auto()
    INFORMATIONAL = auto()


class ItemKind(Enum):
    """Item kinds keyed by their wire code."""

    TEXT_FILE = "0"
    DIRECTORY = "1"
    NAME_SERVER = "2"
    ERROR = "3"
    BINHEX_FILE = "4"
    DOS_BINARY = "5"
    UUENCODED_FILE = "6"
    SEARCH_SERVER = "7"
    TELNET_SESSION = "8"
    BINARY_FILE = "9"
    MIRROR_SERVER = "+"
    GIF_IMAGE = "g"
    IMAGE_FILE = "I"
    PNG_IMAGE = "p"
    JPEG_IMAGE = "j"
    HTML_FILE = "h"
    INFO_MESSAGE = "i"

    @property
    def code(self) -> str:
        return self.value

    @property
    def category(self) -> Category:
        return _CATEGORIES[self]

    @property
    def selectable(self) -> bool:
        """Whether the item receives a label and can be picked by the user."""
        return self.category is not Category.INFORMATIONAL


_CATEGORIES: dict[ItemKind, Category] = {
    ItemKind.TEXT_FILE: Category.CONTENT,
    ItemKind.DIRECTORY: Category.CONTAINER,
    ItemKind.NAME_SERVER: Category.SERVICE,
    ItemKind.ERROR: Category.INFORMATIONAL,
    ItemKind.BINHEX_FILE: Category.CONTENT,
    ItemKind.DOS_BINARY: Category.CONTENT,
    ItemKind.UUENCODED_FILE: Category.CONTENT,
    ItemKind.SEARCH_SERVER: Category.SERVICE,
    ItemKind.TELNET_SESSION: Category.SERVICE,
    ItemKind.BINARY_FILE: Category.CONTENT,
    ItemKind.MIRROR_SERVER: Category.CONTAINER,
    ItemKind.GIF_IMAGE: Category.CONTENT,
    ItemKind.IMAGE_FILE: Category.CONTENT,
    ItemKind.PNG_IMAGE: Category.CONTENT,
    ItemKind.JPEG_IMAGE: Category.CONTENT,
    ItemKind.HTML_FILE: Category.CONTENT,
    ItemKind.INFO_MESSAGE: Category.INFORMATIONAL,
}

IMAGE_KINDS = frozenset(
    {ItemKind.GIF_IMAGE, ItemKind.IMAGE_FILE, ItemKind.PNG_IMAGE, ItemKind.JPEG_IMAGE}
)
BINARY_KINDS = frozenset({ItemKind.BINHEX_FILE, ItemKind.DOS_BINARY, ItemKind.BINARY_FILE})

_BY_CODE: dict[str, ItemKind] = {kind.value: kind for kind in ItemKind}


def kind_for_code(code: str) -> ItemKind:
    """Map a wire code to its ``ItemKind`` or raise ``MalformedListingError``."""
    kind = _BY_CODE.get(code)
    if kind is None:
        raise MalformedListingError(f"Unknown item type: {code}")
    return kind
