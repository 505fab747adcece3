"""Navigation engine: current location, history stack, and fetched items.

Every action re-fetches over the network; nothing is cached. Location state
is committed before the fetch, so a failed fetch leaves the new location in
place with the previous items still loaded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .listing import FIELD_SEPARATOR, Item, parse_listing
from .location import Location
from .transport import fetch as transport_fetch

logger = logging.getLogger(__name__)

FetchFn = Callable[[str, int, str], bytes]


class Session:
    """Mutable navigation state for one client run.

    ``history[position] == current`` holds after every operation except
    ``jump_to_server``, which replaces ``current`` without touching history.
    """

    def __init__(self, start: Location, fetch: FetchFn = transport_fetch) -> None:
        """Create a session positioned at ``start``; no request is sent yet."""
        self.current = start
        self.history: list[Location] = [start]
        self.position = 0
        self.items: list[Item] = []
        self._fetch = fetch

    def _load(self) -> list[Item]:
        location = self.current
        logger.debug("loading %s", location)
        items = parse_listing(self._fetch(location.host, location.port, location.selector))
        self.items = items
        return items

    def fetch_item(self, item: Item) -> bytes:
        """Fetch an item's raw payload without touching navigation state."""
        return self._fetch(item.host, item.port, item.selector)

    def visit(self, location: Location) -> list[Item]:
        """Push ``location`` onto history, make it current, and load it."""
        self.history.append(location)
        self.position = len(self.history) - 1
        self.current = location
        return self._load()

    def back(self) -> bool:
        """Step back one history entry; return ``False`` at the start."""
        if self.position <= 0:
            return False
        self.position -= 1
        self.current = self.history[self.position]
        self._load()
        return True

    def forward(self) -> bool:
        """Step forward one history entry; return ``False`` at the end."""
        if self.position + 1 >= len(self.history):
            return False
        self.position += 1
        self.current = self.history[self.position]
        self._load()
        return True

    def reload(self) -> list[Item]:
        return self._load()

    def jump_to_server(self, host: str, port: int) -> list[Item]:
        """Load the root of another server without recording it in history."""
        self.current = Location(host, port, "")
        return self._load()

    def follow_search(self, item: Item, query: str) -> list[Item]:
        """Visit a search item with ``query`` appended to its selector."""
        selector = f"{item.selector}{FIELD_SEPARATOR}{query}"
        return self.visit(Location(item.host, item.port, selector))
