"""Tests for listing, prompt, and help rendering."""

from __future__ import annotations

import unittest

from burrow import __version__
from burrow.item_types import ItemKind
from burrow.labels import MAX_LABELS
from burrow.listing import Item
from burrow.location import Location
from burrow.render import format_listing, format_prompt, help_text


def _item(kind: ItemKind, display: str) -> Item:
    return Item(kind, display, "/x", "example.org", 70)


class FormatListingTests(unittest.TestCase):
    def test_plain_rendering_labels_only_selectable_items(self) -> None:
        items = [
            _item(ItemKind.INFO_MESSAGE, "Welcome"),
            _item(ItemKind.DIRECTORY, "Docs"),
            _item(ItemKind.ERROR, "Broken"),
            _item(ItemKind.TEXT_FILE, "Readme"),
        ]
        self.assertEqual(
            format_listing(items, no_color=True),
            ["Welcome", "aa Docs...", "ERROR: Broken", "ab Readme"],
        )

    def test_colored_rendering_uses_bold_green_labels(self) -> None:
        lines = format_listing([_item(ItemKind.DIRECTORY, "Docs")])
        self.assertEqual(lines, ["\033[1;32maa\033[0m \033[1mDocs\033[0m..."])

    def test_error_lines_are_red(self) -> None:
        lines = format_listing([_item(ItemKind.ERROR, "Broken")])
        self.assertTrue(lines[0].startswith("\033[1;31mERROR: "))

    def test_items_past_label_limit_have_no_label(self) -> None:
        items = [_item(ItemKind.TEXT_FILE, f"f{n}") for n in range(MAX_LABELS + 1)]
        lines = format_listing(items, no_color=True)

        self.assertEqual(lines[MAX_LABELS - 1], "zz f675")
        self.assertEqual(lines[MAX_LABELS], "   f676")


class PromptAndHelpTests(unittest.TestCase):
    def test_prompt_shows_host_port_and_selector(self) -> None:
        prompt = format_prompt(Location("example.org", 70, "/docs"), no_color=True)
        self.assertEqual(prompt, "example.org:70 /docs> ")

    def test_help_mentions_version_prefix_and_commands(self) -> None:
        text = help_text("!")
        self.assertIn(__version__, text)
        self.assertIn("Command prefix: !", text)
        for command in ("b ", "f ", "s HOST[:PORT]", "r ", "q ", "h "):
            self.assertIn(command, text)


if __name__ == "__main__":
    unittest.main()
