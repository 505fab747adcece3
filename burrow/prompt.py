"""Line prompts on the controlling terminal."""

from __future__ import annotations

from collections.abc import Callable

PromptFn = Callable[[str], str]


def prompt_line(message: str) -> str:
    """Print ``message``, read one line, and return it stripped.

    End of input reads as an empty answer, which callers treat as cancel.
    """
    try:
        return input(message).strip()
    except EOFError:
        return ""


def confirm(prompt: PromptFn, message: str) -> bool:
    """Ask a ``[y/N]`` question; only an explicit ``y`` answers yes."""
    return prompt(message).lower() == "y"
