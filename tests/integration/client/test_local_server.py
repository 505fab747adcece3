"""End-to-end tests against a threaded local selector server.

Runs the real transport, parser, navigation engine, and dispatcher over
loopback TCP.
"""

from __future__ import annotations

import socketserver
import threading
import unittest
from unittest import mock

from burrow.dispatcher import CommandDispatcher
from burrow.errors import TransportError
from burrow.handlers import ExternalHandlers
from burrow.item_types import ItemKind
from burrow.location import Location
from burrow.navigation import Session
from burrow.transport import fetch


def _menu_line(code: str, display: str, selector: str, host: str, port: int) -> str:
    return f"{code}{display}\t{selector}\t{host}\t{port}\r\n"


class _SelectorHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        selector = self.rfile.readline().decode("utf-8").rstrip("\r\n")
        self.server.selectors.append(selector)  # type: ignore[attr-defined]
        host, port = self.server.server_address[:2]
        if selector == "":
            body = (
                _menu_line("i", "Local test server", "fake", "(NULL)", 0)
                + _menu_line("1", "Docs", "/docs", host, port)
                + _menu_line("0", "About", "/about.txt", host, port)
                + _menu_line("7", "Search", "/search", host, port)
                + ".\r\n"
            )
        elif selector == "/docs":
            body = _menu_line("0", "Manual", "/manual.txt", host, port) + ".\r\n"
        elif selector.startswith("/search\t"):
            query = selector.split("\t", 1)[1]
            body = _menu_line("0", f"Result for {query}", "/r", host, port) + ".\r\n"
        elif selector == "/about.txt":
            body = "A small test hole.\r\n"
        else:
            body = _menu_line("3", "Not found", "", "error.host", 1) + ".\r\n"
        self.wfile.write(body.encode("utf-8"))


class _Server(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


class LocalServerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.server = _Server(("127.0.0.1", 0), _SelectorHandler)
        self.server.selectors = []  # type: ignore[attr-defined]
        thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        thread.start()
        self.addCleanup(self.server.server_close)
        self.addCleanup(self.server.shutdown)
        self.host, self.port = self.server.server_address[:2]

    def test_fetch_round_trip(self) -> None:
        payload = fetch(self.host, self.port, "/about.txt")
        self.assertEqual(payload, b"A small test hole.\r\n")
        self.assertEqual(self.server.selectors, ["/about.txt"])  # type: ignore[attr-defined]

    def test_browse_search_and_history(self) -> None:
        output: list[str] = []
        answers = ["burrows"]
        handlers = mock.Mock(spec=ExternalHandlers)
        session = Session(Location(self.host, self.port, ""))
        dispatcher = CommandDispatcher(
            session,
            handlers,
            prompt=lambda message: answers.pop(0),
            out=output.append,
            no_color=True,
        )

        dispatcher.start()
        self.assertIn("aa Docs...", output)

        dispatcher.handle_line("aa")
        self.assertEqual(session.current.selector, "/docs")
        self.assertEqual(session.items[0].display, "Manual")

        dispatcher.handle_line("/b")
        dispatcher.handle_line("ac")
        self.assertEqual(session.current.selector, "/search\tburrows")
        self.assertEqual(session.items[0].display, "Result for burrows")
        self.assertEqual(len(session.history), 3)

        dispatcher.handle_line("/b")
        self.assertEqual(session.current.selector, "/docs")
        dispatcher.handle_line("/b")
        self.assertEqual(session.position, 0)
        dispatcher.handle_line("ab")
        handlers.handle.assert_called_once_with(
            ItemKind.TEXT_FILE, "About", b"A small test hole.\r\n"
        )

    def test_unreachable_server_raises_transport_error(self) -> None:
        self.server.shutdown()
        self.server.server_close()
        with self.assertRaises(TransportError):
            fetch(self.host, self.port, "")


if __name__ == "__main__":
    unittest.main()
