"""Persistent JSON config helpers.

Stores external program commands, the download folder, the command prefix,
and the inline text style. All access is defensive: malformed or missing
config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "burrow"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_COMMAND_PREFIX = "/"
DEFAULT_BROWSER_COMMAND = "firefox"
DEFAULT_IMAGE_COMMAND = "feh"
DEFAULT_TELNET_COMMAND = "telnet"
DEFAULT_TEXT_COMMAND = "less"
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class ClientConfig:
    """Resolved client settings.

    ``text_command`` of ``None`` prints text items inline. ``download_folder``
    of ``None`` asks for a full destination path on every save.
    """

    command_prefix: str = DEFAULT_COMMAND_PREFIX
    browser_command: str = DEFAULT_BROWSER_COMMAND
    image_command: str = DEFAULT_IMAGE_COMMAND
    telnet_command: str = DEFAULT_TELNET_COMMAND
    text_command: str | None = DEFAULT_TEXT_COMMAND
    download_folder: Path | None = None
    style: str = DEFAULT_STYLE


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def is_command_prefix(value: str) -> bool:
    """Return whether value is a valid single-character command prefix."""
    return len(value) == 1 and value.isprintable() and not value.isspace()


def _load_command(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()


def load_client_config() -> ClientConfig:
    """Build a ``ClientConfig`` from the persisted JSON, value by value."""
    data = load_config()

    prefix = data.get("command_prefix")
    if not isinstance(prefix, str) or not is_command_prefix(prefix):
        prefix = DEFAULT_COMMAND_PREFIX

    # Explicit null means inline text; a missing key keeps the pager default.
    text_command: str | None = DEFAULT_TEXT_COMMAND
    if "text_command" in data:
        raw_text_command = data["text_command"]
        if raw_text_command is None:
            text_command = None
        elif isinstance(raw_text_command, str) and raw_text_command.strip():
            text_command = raw_text_command.strip()

    download_folder: Path | None = None
    raw_folder = data.get("download_folder")
    if isinstance(raw_folder, str) and raw_folder.strip():
        download_folder = Path(raw_folder.strip()).expanduser()

    return ClientConfig(
        command_prefix=prefix,
        browser_command=_load_command(data, "browser_command", DEFAULT_BROWSER_COMMAND),
        image_command=_load_command(data, "image_command", DEFAULT_IMAGE_COMMAND),
        telnet_command=_load_command(data, "telnet_command", DEFAULT_TELNET_COMMAND),
        text_command=text_command,
        download_folder=download_folder,
        style=_load_command(data, "style", DEFAULT_STYLE),
    )

