"""InventoryService — catalog inspection and day-by-day simulation.

Domain errors never escape this layer: they are translated into
``ServiceResult(ok=False)`` with one of the codes below.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from gildedrose.domain.errors import IndexOutOfRange, InvalidConstruction
from gildedrose.domain.inventory import Inventory
from gildedrose.services.base import BaseService
from gildedrose.services.result import ServiceResult

if TYPE_CHECKING:
    from gildedrose.config.models import ItemSpec

logger = logging.getLogger(__name__)

INVALID_ITEM = "INVALID_ITEM"
INVALID_DAYS = "INVALID_DAYS"
INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"


def build_inventory(specs: Iterable[ItemSpec]) -> Inventory:
    """Build an inventory from catalog specs, in order.

    Raises:
        InvalidConstruction: From the first spec that fails validation,
            re-raised with its catalog position in the message.
    """
    items = []
    for position, spec in enumerate(specs):
        try:
            items.append(spec.to_item())
        except InvalidConstruction as exc:
            raise InvalidConstruction(f"Catalog item #{position} ({spec.name!r}): {exc}") from exc
    return Inventory(items)


def load_failure(exc: InvalidConstruction) -> ServiceResult:
    """Result reported when the configured catalog cannot be built."""
    return ServiceResult.failure("load_catalog", INVALID_ITEM, str(exc))


class InventoryService(BaseService):
    """Read and advance the catalog held by an :class:`Inventory`."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def show(self) -> ServiceResult:
        """Current catalog state."""
        items = self._snapshot()
        return ServiceResult(
            ok=True,
            op="show_catalog",
            data={"count": self._inventory.item_count, "items": items},
            warnings=self._pending_warnings(),
        )

    def get_item(self, index: int, *, days: int = 0) -> ServiceResult:
        """State of the item at *index* after *days* ticks.

        The index is checked before any tick runs, so a failed lookup
        leaves the catalog untouched.
        """
        op = "get_item"
        if days < 0:
            return _invalid_days(op, days)
        try:
            self._inventory.get_item(index)
        except IndexOutOfRange as exc:
            return ServiceResult.failure(
                op,
                INDEX_OUT_OF_RANGE,
                str(exc),
                count=self._inventory.item_count,
            )

        warnings = self._pending_warnings()
        for day in range(1, days + 1):
            self._advance(day, warnings)

        item = self._inventory.get_item(index)
        data: dict[str, Any] = {"index": index, "day": days}
        if item is not None:
            data.update(item.to_dict())
            data["rule"] = self._inventory.registry.rule_for(item).name
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def simulate(self, days: int) -> ServiceResult:
        """Run *days* ticks, recording the catalog at day 0 and after each tick."""
        op = "simulate"
        if days < 0:
            return _invalid_days(op, days)

        warnings = self._pending_warnings()
        history: list[dict[str, Any]] = [{"day": 0, "items": self._snapshot()}]
        for day in range(1, days + 1):
            history.append({"day": day, "items": self._advance(day, warnings)})

        logger.debug("Simulated %d days over %d items", days, self._inventory.item_count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"days": days, "count": self._inventory.item_count, "history": history},
            warnings=warnings,
        )

    def list_rules(self) -> ServiceResult:
        """Rules in evaluation order, default last."""
        registry = self._inventory.registry
        default = registry.default_rule
        rules = [
            {
                "priority": priority,
                "name": rule.name,
                "class": type(rule).__name__,
                "default": rule is default,
            }
            for priority, rule in enumerate(registry.rules)
        ]
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={"count": registry.rule_count, "items": rules},
            warnings=self._pending_warnings(),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance(self, day: int, warnings: list[str]) -> list[dict[str, Any]]:
        self._inventory.tick()
        items = self._snapshot()
        self._dispatch_event("post_tick", {"day": day, "items": items}, warnings)
        return items

    def _snapshot(self) -> list[dict[str, Any]]:
        return [
            {"index": index, **item.to_dict()}
            for index, item in enumerate(self._inventory.items)
            if item is not None
        ]


def _invalid_days(op: str, days: int) -> ServiceResult:
    return ServiceResult.failure(op, INVALID_DAYS, f"Days must be >= 0, got {days}", days=days)
