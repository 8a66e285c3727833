"""Inventory — the catalog orchestrator.

One ``tick()`` is one simulated day: every item is aged exactly once,
strictly in collection order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from gildedrose.domain.errors import IndexOutOfRange, InvalidArgument
from gildedrose.domain.registry import RuleRegistry

if TYPE_CHECKING:
    from gildedrose.domain.items import Item
    from gildedrose.domain.rules import UpdateRule

logger = logging.getLogger(__name__)


class Inventory:
    """Holds the item catalog and ages it through a :class:`RuleRegistry`.

    Args:
        items: Catalog entries in display order. ``None`` entries are kept
            in place but skipped by ``tick()``.
        registry: Rule registry to dispatch through. A registry with the
            built-in rules is created when omitted.

    Raises:
        InvalidArgument: If *items* is None.
    """

    def __init__(
        self,
        items: Iterable[Item | None] | None,
        registry: RuleRegistry | None = None,
    ) -> None:
        if items is None:
            raise InvalidArgument("Items cannot be None")
        self._items: list[Item | None] = list(items)
        self._registry = registry if registry is not None else RuleRegistry()

    @property
    def items(self) -> list[Item | None]:
        return self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def __len__(self) -> int:
        return len(self._items)

    def get_item(self, index: int) -> Item | None:
        """Return the item at *index*.

        Raises:
            IndexOutOfRange: If *index* is negative or past the last item.
        """
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(f"Index out of range: {index}")
        return self._items[index]

    def add_rule(self, rule: UpdateRule | None) -> None:
        """Register *rule* at top priority (forwarded to the registry)."""
        self._registry.add_rule(rule)

    def tick(self) -> None:
        """Age every item by one day, in collection order."""
        updated = 0
        for item in self._items:
            if item is not None:
                self._registry.update(item)
                updated += 1
        logger.debug("Tick complete: %d of %d items updated", updated, len(self._items))
