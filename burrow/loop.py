"""Blocking read-eval loop around the command dispatcher."""

from __future__ import annotations

from collections.abc import Callable

from .dispatcher import CommandDispatcher
from .render import format_prompt


def run_client(
    dispatcher: CommandDispatcher,
    read_line: Callable[[str], str] = input,
) -> int:
    """Load the first listing, then read and dispatch lines until quit.

    End of input and Ctrl-C at the prompt quit like ``q``. Returns the
    process exit status.
    """
    dispatcher.start()
    while True:
        prompt = format_prompt(dispatcher.session.current, dispatcher.no_color)
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            dispatcher.out("")
            dispatcher.out("Goodbye.")
            return 0
        if not dispatcher.handle_line(line):
            return 0
