"""Listing, prompt, and help text rendering.

Pure string builders; callers decide where the lines go.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import __version__
from .item_types import ItemKind
from .labels import MAX_LABELS, encode_label
from .listing import Item
from .location import Location

RESET = "\033[0m"
BOLD = "\033[1m"
LABEL = "\033[1;32m"
ERROR = "\033[1;31m"


def _style(code: str, text: str, no_color: bool) -> str:
    if no_color:
        return text
    return f"{code}{text}{RESET}"


def format_item(item: Item, no_color: bool = False) -> str:
    """Render one item's text: bold when selectable, ``...`` after directories."""
    text = item.display
    if item.kind.selectable:
        text = _style(BOLD, text, no_color)
    if item.kind is ItemKind.DIRECTORY:
        text += "..."
    return text


def format_listing(items: Iterable[Item], no_color: bool = False) -> list[str]:
    """Render a listing with two-letter labels in front of selectable items.

    Items past the last representable label are shown without one; they
    cannot be selected.
    """
    lines: list[str] = []
    ordinal = 0
    for item in items:
        prefix = ""
        if item.kind.selectable:
            if ordinal < MAX_LABELS:
                prefix = _style(LABEL, encode_label(ordinal), no_color) + " "
            else:
                prefix = "   "
            ordinal += 1
        elif item.kind is ItemKind.ERROR:
            prefix = _style(ERROR, "ERROR: ", no_color)
        lines.append(prefix + format_item(item, no_color))
    return lines


def format_prompt(location: Location, no_color: bool = False) -> str:
    return _style(BOLD, f"{location.host}:{location.port} {location.selector}>", no_color) + " "


def welcome_text(prefix: str) -> str:
    return f"\tWelcome to burrow -- type `{prefix}h' for help"


def help_text(prefix: str) -> str:
    return f"""burrow -- version {__version__}

Select a menu by typing the two letters in front of it (normally written
in bold green).

* List of commands

  Command prefix: {prefix}

b             ; go back in the history
f             ; go forth in the history
s HOST[:PORT] ; change the current server and access it
r             ; reload the current page
q             ; exit the program
h             ; print this message"""
