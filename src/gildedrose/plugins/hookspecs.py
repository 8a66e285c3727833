"""Pluggy hook specifications for gildedrose.

One setup-time hook lets plugins contribute aging rules; one lifecycle
hook is dispatched after every simulated day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from gildedrose.domain.rules import UpdateRule

hookspec = pluggy.HookspecMarker("gildedrose")


class GildedRoseHookSpec:
    """Hook specifications for the gildedrose plugin system."""

    @hookspec
    def register_rules(self) -> list[UpdateRule] | None:
        """Return rules to register at top priority, highest priority last."""

    @hookspec
    def post_tick(self, day: int, items: list[dict[str, Any]]) -> None:
        """Called after each tick with the catalog snapshot for *day*."""
