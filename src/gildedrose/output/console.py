"""Rich Console factory and theme for gildedrose output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from gildedrose.domain.items import (
    AGED_BRIE_NAME,
    BACKSTAGE_PASS_NAME,
    CONJURED_PREFIX,
    LEGENDARY_NAME,
)

ROSE_THEME = Theme(
    {
        "rose.ok": "bold green",
        "rose.error": "bold red",
        "rose.warning": "bold yellow",
        "rose.op": "bold cyan",
        "rose.key": "dim",
        "rose.day": "bold magenta",
        "rose.name": "bold",
        "rose.number": "cyan",
        "rose.expired": "red",
        "rose.item.legendary": "bold yellow",
        "rose.item.brie": "green",
        "rose.item.pass": "blue",
        "rose.item.conjured": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROSE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_item(name: str) -> str:
    """Return the Rich style name for an item name."""
    if name == LEGENDARY_NAME:
        return "rose.item.legendary"
    if name == AGED_BRIE_NAME:
        return "rose.item.brie"
    if name == BACKSTAGE_PASS_NAME:
        return "rose.item.pass"
    if name.startswith(CONJURED_PREFIX):
        return "rose.item.conjured"
    return ""
