"""Error kinds raised by the protocol engine.

Every navigation failure is a ``BurrowError`` subclass so the dispatcher can
report it on one line and keep the read-eval loop alive.
"""

from __future__ import annotations


class BurrowError(Exception):
    """Base class for recoverable client errors."""


class TransportError(BurrowError):
    """Connecting to, writing to, or reading from a server failed."""


class DecodeError(BurrowError):
    """A response could not be decoded as text."""


class MalformedListingError(BurrowError):
    """A listing line has a bad shape, unknown type code, or bad port."""


class InvalidLocationError(BurrowError):
    """A ``HOST[:PORT]`` string could not be parsed."""


__all__ = [
    "BurrowError",
    "DecodeError",
    "InvalidLocationError",
    "MalformedListingError",
    "TransportError",
]
