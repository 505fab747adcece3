"""Blocking selector transport.

One request per connection: send the selector line, read until the server
closes, return the raw bytes. No timeout and no retry.
"""

from __future__ import annotations

import logging
import socket

from .errors import TransportError

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\r\n"
RECV_CHUNK_SIZE = 4096


def fetch(host: str, port: int, selector: str) -> bytes:
    """Send ``selector`` to ``host:port`` and return the full response.

    Any socket failure is raised as ``TransportError``. The connection is
    closed before returning, on success and on failure.
    """
    request = f"{selector}{LINE_TERMINATOR}".encode("utf-8")
    logger.debug("connecting to %s:%d", host, port)
    try:
        with socket.create_connection((host, port)) as sock:
            sock.sendall(request)
            logger.debug("sent selector %r", selector)
            chunks: list[bytes] = []
            while True:
                chunk = sock.recv(RECV_CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
    except (OSError, ValueError) as exc:
        # ValueError covers IDNA failures (UnicodeError) and NUL bytes in the host.
        raise TransportError(f"{host}:{port}: {exc}") from exc

    payload = b"".join(chunks)
    logger.debug("received %d bytes from %s:%d", len(payload), host, port)
    return payload
