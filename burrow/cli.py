"""Command-line front door for burrow.

Parses CLI options, resolves the initial server, and loads config.
Then hands control to the interactive read-eval loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import is_command_prefix, load_client_config
from .dispatcher import CommandDispatcher
from .errors import InvalidLocationError
from .handlers import ExternalHandlers
from .location import Location, parse_server_address
from .loop import run_client
from .navigation import Session


def _command_prefix(value: str) -> str:
    """argparse type for a single printable, non-space character."""
    if not is_command_prefix(value):
        raise argparse.ArgumentTypeError(f"invalid command prefix: {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Browse gopher menus from the terminal.",
    )
    parser.add_argument("server", metavar="HOST[:PORT]", help="Server to open (port defaults to 70).")
    parser.add_argument(
        "--prefix",
        type=_command_prefix,
        default=None,
        help="Command prefix character (overrides the config file).",
    )
    parser.add_argument("--style", default=None, help="Pygments style for inline text files.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styling.")
    parser.add_argument("--verbose", action="store_true", help="Log protocol activity to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the client until the user quits.

    A missing server argument is an argparse usage error. An unparsable one
    raises ``SystemExit`` with the message, before any connection is made.
    """
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        host, port = parse_server_address(args.server)
    except InvalidLocationError as exc:
        raise SystemExit(str(exc)) from None

    config = load_client_config()
    if args.style is not None:
        config = replace(config, style=args.style)
    prefix = args.prefix or config.command_prefix

    session = Session(Location(host, port))
    handlers = ExternalHandlers(config, no_color=args.no_color)
    dispatcher = CommandDispatcher(session, handlers, prefix=prefix, no_color=args.no_color)
    return run_client(dispatcher)
