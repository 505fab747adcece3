"""Inline text display: sanitization and Pygments highlighting.

Neutralizes terminal control bytes so fetched text cannot move the cursor,
ring the bell, or change terminal modes while it is printed.
"""

from __future__ import annotations

import re

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

FALLBACK_STYLE = "monokai"


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return FALLBACK_STYLE
    return style


def _lexer_for(name: str, source: str):
    try:
        return get_lexer_for_filename(name, source)
    except ClassNotFound:
        return TextLexer()


def colorize_text(
    source: str,
    name: str,
    style: str = FALLBACK_STYLE,
    *,
    no_color: bool = False,
) -> str:
    """Return printable text, highlighted by the lexer guessed from ``name``.

    The item's display name stands in for a filename, so ``notes.py`` gets
    Python highlighting and plain descriptions fall back to unstyled text.
    """
    source = sanitize_terminal_text(source)
    if no_color:
        return source
    lexer = _lexer_for(name, source)
    formatter = TerminalFormatter(style=_normalize_style(style))
    return pygments_highlight(source, lexer, formatter)
