"""BaseService — abstract foundation for gildedrose services.

Every service receives an :class:`Inventory` at construction time and,
optionally, a :class:`PluginManager` for lifecycle events.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gildedrose.domain.inventory import Inventory
    from gildedrose.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class InventoryService(BaseService):
            def simulate(self, days: int) -> ServiceResult:
                self._inventory.tick()
                ...
    """

    def __init__(self, inventory: Inventory, plugins: PluginManager | None = None) -> None:
        self._inventory = inventory
        self._plugins = plugins

    def _pending_warnings(self) -> list[str]:
        """Warnings the plugin manager collected while loading, cleared on read."""
        if self._plugins is None:
            return []
        return self._plugins.drain_warnings()

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call plugin hook *hook_name*. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
