"""Command dispatcher: one round of the read-eval loop.

A line is either a prefixed command (``/b``, ``/s host:port``...), the bare
word ``help``, or a two-letter item label. Anything else is ignored.
Navigation errors are printed on one line and never end the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import DEFAULT_COMMAND_PREFIX
from .errors import BurrowError, InvalidLocationError
from .handlers import ExternalHandlers, HandlerResult
from .item_types import Category, ItemKind
from .labels import decode_label
from .listing import Item, item_for_ordinal
from .location import parse_server_address
from .navigation import Session
from .prompt import PromptFn, prompt_line
from .render import format_listing, help_text, welcome_text

logger = logging.getLogger(__name__)

URL_SELECTOR_PREFIX = "URL:"


class CommandDispatcher:
    """Route user input to the navigation engine or external handlers."""

    def __init__(
        self,
        session: Session,
        handlers: ExternalHandlers,
        *,
        prompt: PromptFn = prompt_line,
        out: Callable[[str], None] = print,
        prefix: str = DEFAULT_COMMAND_PREFIX,
        no_color: bool = False,
    ) -> None:
        self.session = session
        self.handlers = handlers
        self.prompt = prompt
        self.out = out
        self.prefix = prefix
        self.no_color = no_color

    def show_listing(self) -> None:
        for line in format_listing(self.session.items, self.no_color):
            self.out(line)

    def start(self) -> None:
        """Load the initial location and greet the user.

        A failed first fetch is reported like any other navigation error.
        """
        try:
            self.session.reload()
        except BurrowError as exc:
            self.out(str(exc))
        else:
            self.show_listing()
        self.out(welcome_text(self.prefix))

    def handle_line(self, line: str) -> bool:
        """Process one input line; return ``False`` when the user quits."""
        try:
            return self._dispatch(line.strip())
        except BurrowError as exc:
            logger.debug("navigation failed", exc_info=True)
            self.out(str(exc))
            return True

    def _dispatch(self, line: str) -> bool:
        if line.startswith(self.prefix):
            command, _, args = line[len(self.prefix):].partition(" ")
            return self.run_command(command, args.strip())
        if line == "help":
            return self.run_command("h", "")
        if len(line) != 2:
            return True

        ordinal = decode_label(line)
        if ordinal is None:
            return True
        item = item_for_ordinal(self.session.items, ordinal)
        if item is None:
            return True
        self.select(item)
        return True

    def run_command(self, command: str, args: str) -> bool:
        """Run a prefixed command; unknown commands print help."""
        session = self.session
        if command == "b":
            if session.back():
                self.show_listing()
        elif command == "f":
            if session.forward():
                self.show_listing()
        elif command == "r":
            session.reload()
            self.show_listing()
        elif command == "s":
            self._set_server(args)
        elif command == "q":
            self.out("Goodbye.")
            return False
        else:
            self.out(help_text(self.prefix))
        return True

    def _set_server(self, args: str) -> None:
        if not args:
            self.out(f"{self.session.current.host}:{self.session.current.port}")
            return
        try:
            host, port = parse_server_address(args)
        except InvalidLocationError as exc:
            self.out(f"Invalid server:\n  `{args}'\n{exc}")
            return
        self.session.jump_to_server(host, port)
        self.show_listing()

    def select(self, item: Item) -> None:
        """Act on a selected item according to its kind's category.

        Informational items never reach here; they carry no label.
        """
        category = item.kind.category
        if category is Category.CONTAINER:
            self.session.visit(item.location)
            self.show_listing()
        elif category is Category.SERVICE:
            self._select_service(item)
        elif category is Category.CONTENT:
            self._select_content(item)

    def _select_service(self, item: Item) -> None:
        kind = item.kind
        if kind is ItemKind.SEARCH_SERVER:
            query = self.prompt("Enter your search string: ")
            if not query:
                self.out("Cancelled")
                return
            self.session.follow_search(item, query)
            self.show_listing()
        elif kind is ItemKind.TELNET_SESSION:
            self.handlers.launch_session(item.host, item.port)
        else:
            self.out("CCSO name servers are not supported.")

    def _select_content(self, item: Item) -> HandlerResult:
        if item.kind is ItemKind.HTML_FILE and item.selector.startswith(URL_SELECTOR_PREFIX):
            return self.handlers.open_url(item.selector[len(URL_SELECTOR_PREFIX):])
        payload = self.session.fetch_item(item)
        return self.handlers.handle(item.kind, item.display, payload)
