"""External content handlers, session launcher, and destination resolution.

Content items are shown inline, piped to a pager, saved to disk, or opened
with an external viewer. Outcomes are reported as ``HandlerResult`` and a
status line; they never feed back into navigation state.
"""

from __future__ import annotations

import shlex
import subprocess
import tempfile
from collections.abc import Callable, Sequence
from enum import Enum, auto
from pathlib import Path

from .config import ClientConfig
from .errors import DecodeError
from .highlight import colorize_text
from .item_types import BINARY_KINDS, IMAGE_KINDS, ItemKind
from .prompt import PromptFn, confirm, prompt_line

UUDECODE_COMMAND = "uudecode"
TEMP_PREFIX = "burrow."

_IMAGE_SUFFIXES: dict[ItemKind, str] = {
    ItemKind.GIF_IMAGE: ".gif",
    ItemKind.PNG_IMAGE: ".png",
    ItemKind.JPEG_IMAGE: ".jpg",
    ItemKind.IMAGE_FILE: "",
}

Runner = Callable[..., subprocess.CompletedProcess]


class HandlerResult(Enum):
    """Outcome of a content hand-off."""

    OK = auto()
    FAILED = auto()
    CANCELLED = auto()


def exit_status_message(returncode: int) -> str:
    """Describe an external command's exit status for the status line."""
    if returncode == 0:
        return "Command finished successfully"
    if returncode < 0:
        return "Command failed with exit code (killed)"
    return f"Command failed with exit code {returncode}"


class ExternalHandlers:
    """Hand fetched payloads to the user or to external programs."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        prompt: PromptFn = prompt_line,
        out: Callable[[str], None] = print,
        run: Runner = subprocess.run,
        no_color: bool = False,
    ) -> None:
        self.config = config
        self.prompt = prompt
        self.out = out
        self.run = run
        self.no_color = no_color

    # Content handler ----------------------------------------------------

    def handle(self, kind: ItemKind, display: str, payload: bytes) -> HandlerResult:
        """Dispatch a content item's payload by kind."""
        if kind is ItemKind.TEXT_FILE:
            return self._show_text(display, payload)
        if kind in BINARY_KINDS:
            return self._save(display, payload)
        if kind is ItemKind.UUENCODED_FILE:
            return self._uudecode(display, payload)
        if kind in IMAGE_KINDS:
            return self._view(self.config.image_command, display, payload, _IMAGE_SUFFIXES[kind])
        if kind is ItemKind.HTML_FILE:
            return self._view(self.config.browser_command, display, payload, ".html")
        raise ValueError(f"not a content item kind: {kind.name}")

    def launch_session(self, host: str, port: int) -> HandlerResult:
        """Start the configured telnet client against ``host:port``."""
        return self._run_command(self.config.telnet_command, [host, str(port)])

    def open_url(self, url: str) -> HandlerResult:
        return self._run_command(self.config.browser_command, [url])

    # Destination resolution ---------------------------------------------

    def resolve_destination(self, suggested_name: str) -> Path | None:
        """Ask where to save a file; ``None`` means the user cancelled.

        With a download folder the suggested name is used first. Declining to
        replace an existing file asks for another name instead of retrying the
        same one.
        """
        folder = self.config.download_folder
        suggested = Path(suggested_name).name if suggested_name else ""
        while True:
            if folder is None:
                answer = self.prompt("Where should the file be saved (empty to cancel)? ")
                if not answer:
                    return None
                try:
                    target = Path(answer).expanduser()
                except RuntimeError as exc:
                    self.out(f"Invalid path: {exc}")
                    continue
            elif suggested:
                target = folder / suggested
            else:
                answer = self.prompt("Please enter a filename (empty to cancel)? ")
                if not answer:
                    return None
                target = folder / answer

            if not target.exists():
                return target
            if confirm(self.prompt, f"File `{target}' already exists. Replace it [y/N]? "):
                return target
            suggested = ""

    # Helpers --------------------------------------------------------------

    def _wants_download(self) -> bool:
        return confirm(self.prompt, "Do you want to download the file [y/N]? ")

    def _write(self, target: Path, payload: bytes) -> HandlerResult:
        try:
            target.write_bytes(payload)
        except OSError as exc:
            self.out(f"Could not save file: {exc}")
            return HandlerResult.FAILED
        self.out("File saved.")
        return HandlerResult.OK

    def _save(self, display: str, payload: bytes) -> HandlerResult:
        target = self.resolve_destination(display)
        if target is None:
            self.out("Cancelled")
            return HandlerResult.CANCELLED
        return self._write(target, payload)

    def _write_temp(self, payload: bytes, suffix: str = "") -> Path:
        with tempfile.NamedTemporaryFile(prefix=TEMP_PREFIX, suffix=suffix, delete=False) as handle:
            handle.write(payload)
        return Path(handle.name)

    def _run_command(
        self,
        command: str,
        args: Sequence[str],
        *,
        input: bytes | None = None,
    ) -> HandlerResult:
        argv = [*shlex.split(command), *args]
        if not argv:
            self.out("No command configured.")
            return HandlerResult.FAILED
        try:
            proc = self.run(argv, input=input, check=False)
        except OSError as exc:
            self.out(f"Failed to launch {argv[0]}: {exc}")
            return HandlerResult.FAILED
        self.out(exit_status_message(proc.returncode))
        return HandlerResult.OK if proc.returncode == 0 else HandlerResult.FAILED

    def _show_text(self, display: str, payload: bytes) -> HandlerResult:
        if self.config.text_command is not None:
            result = self._run_command(self.config.text_command, [], input=payload)
            if self._wants_download():
                return self._save(display, payload)
            return result

        if self._wants_download():
            return self._save(display, payload)
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError:
            raise DecodeError("UTF8-invalid data") from None
        self.out(colorize_text(text, display, self.config.style, no_color=self.no_color))
        return HandlerResult.OK

    def _uudecode(self, display: str, payload: bytes) -> HandlerResult:
        target = self.resolve_destination(display)
        if target is None:
            self.out("Cancelled")
            return HandlerResult.CANCELLED
        return self._run_command(UUDECODE_COMMAND, ["-o", str(target)], input=payload)

    def _view(self, command: str, display: str, payload: bytes, suffix: str) -> HandlerResult:
        if self._wants_download():
            target = self.resolve_destination(display)
            if target is not None:
                return self._write(target, payload)
        try:
            path = self._write_temp(payload, suffix)
        except OSError as exc:
            self.out(f"Could not write temporary file: {exc}")
            return HandlerResult.FAILED
        return self._run_command(command, [str(path)])
