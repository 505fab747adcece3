"""Two-letter labels for selectable listing items."""

from __future__ import annotations

ALPHABET_SIZE = 26
MAX_LABELS = ALPHABET_SIZE * ALPHABET_SIZE


def encode_label(n: int) -> str:
    """Return the label for ordinal ``n`` (``0 -> "aa"``, ``27 -> "bb"``).

    Only ``0 <= n < 676`` is representable.
    """
    if n < 0 or n >= MAX_LABELS:
        raise ValueError(f"label ordinal out of range: {n}")
    first, second = divmod(n, ALPHABET_SIZE)
    return chr(ord("a") + first) + chr(ord("a") + second)


def decode_label(label: str) -> int | None:
    """Return the ordinal for a two-letter label, or ``None`` when invalid."""
    if len(label) != 2:
        return None
    first, second = label[0], label[1]
    if not ("a" <= first <= "z") or not ("a" <= second <= "z"):
        return None
    return (ord(first) - ord("a")) * ALPHABET_SIZE + (ord(second) - ord("a"))
