"""Server locations and ``HOST[:PORT]`` parsing."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidLocationError

DEFAULT_PORT = 70
MAX_PORT = 0xFFFF


@dataclass(frozen=True)
class Location:
    """A listing to fetch: server address plus selector."""

    host: str
    port: int = DEFAULT_PORT
    selector: str = ""

    def __str__(self) -> str:
        return f"{self.host}:{self.port} {self.selector}"


def parse_port(text: str) -> int:
    """Parse a decimal port that fits in 16 bits.

    A single leading ``+`` is accepted. Raises ``ValueError`` for anything
    else, including ``-`` and whitespace.
    """
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(text)
    port = int(digits)
    if port > MAX_PORT:
        raise ValueError(text)
    return port


def parse_server_address(text: str) -> tuple[str, int]:
    """Split ``HOST[:PORT]`` into a host and port, defaulting the port to 70."""
    if ":" not in text:
        host, port = text, DEFAULT_PORT
    else:
        host, raw_port = text.split(":", 1)
        try:
            port = parse_port(raw_port)
        except ValueError:
            raise InvalidLocationError(f"Invalid port number: {raw_port}") from None
    if not host:
        raise InvalidLocationError(f"Invalid server: `{text}'")
    return host, port
