"""Read-eval loop tests with scripted input."""

from __future__ import annotations

import unittest
from unittest import mock

from burrow.dispatcher import CommandDispatcher
from burrow.handlers import ExternalHandlers
from burrow.location import Location
from burrow.loop import run_client
from burrow.navigation import Session

MENU = b"1Docs\t/docs\texample.org\t70\r\n.\r\n"


def _scripted(lines: list[str], prompts: list[str]):
    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        if not lines:
            raise EOFError
        return lines.pop(0)

    return read_line


class RunClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.output: list[str] = []
        session = Session(Location("example.org", 70, ""), fetch=lambda host, port, selector: MENU)
        self.dispatcher = CommandDispatcher(
            session,
            mock.Mock(spec=ExternalHandlers),
            out=self.output.append,
            no_color=True,
        )

    def test_quit_command_ends_loop(self) -> None:
        prompts: list[str] = []
        status = run_client(self.dispatcher, _scripted(["aa", "/q", "never read"], prompts))

        self.assertEqual(status, 0)
        self.assertEqual(prompts, ["example.org:70 > ", "example.org:70 /docs> "])
        self.assertEqual(self.output[-1], "Goodbye.")

    def test_end_of_input_quits(self) -> None:
        prompts: list[str] = []
        self.assertEqual(run_client(self.dispatcher, _scripted([], prompts)), 0)
        self.assertEqual(self.output[-1], "Goodbye.")

    def test_keyboard_interrupt_at_prompt_quits(self) -> None:
        def interrupted(prompt: str) -> str:
            raise KeyboardInterrupt

        self.assertEqual(run_client(self.dispatcher, interrupted), 0)
        self.assertEqual(self.output[-1], "Goodbye.")

    def test_initial_listing_and_welcome_are_printed(self) -> None:
        run_client(self.dispatcher, _scripted([], []))
        self.assertEqual(self.output[0], "aa Docs...")
        self.assertEqual(self.output[1], "\tWelcome to burrow -- type `/h' for help")


if __name__ == "__main__":
    unittest.main()
