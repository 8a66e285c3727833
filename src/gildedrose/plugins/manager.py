"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Capabilities: extra aging rules and post-tick observers.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from gildedrose.domain.rules import UpdateRule
from gildedrose.plugins.hookspecs import GildedRoseHookSpec

if TYPE_CHECKING:
    from gildedrose.domain.inventory import Inventory

PROJECT_NAME = "gildedrose"
ENTRY_POINT_GROUP = "gildedrose.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(GildedRoseHookSpec)
        self._loaded: bool = False
        self._warnings: list[str] = []

    def discover_and_load(self) -> list[str]:
        """Discover plugins from the ``gildedrose.plugins`` entry point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Rule registration
    # ------------------------------------------------------------------

    def install_rules(self, inventory: Inventory) -> list[str]:
        """Add every plugin-provided rule to *inventory* at top priority.

        Rules are added in the order each plugin returns them, so the last
        rule in a plugin's list ends up with the highest priority. Bad
        registrations are skipped and reported through :meth:`drain_warnings`.

        Returns the names of the installed rules.
        """
        installed: list[str] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            for rule_name, rule in self._collect_plugin_rules(plugin, plugin_name):
                inventory.add_rule(rule)
                installed.append(rule_name)
        return installed

    def drain_warnings(self) -> list[str]:
        """Return and clear warnings raised while loading plugins or rules."""
        warnings, self._warnings = self._warnings, []
        return warnings

    def _warn(self, message: str, *, exc_info: bool = False) -> None:
        logger.debug("%s", message, exc_info=exc_info)
        self._warnings.append(message)

    def _collect_plugin_rules(
        self, plugin: object, plugin_name: str
    ) -> list[tuple[str, UpdateRule]]:
        hook = getattr(plugin, "register_rules", None)
        if hook is None:
            return []

        try:
            rules = hook()
        except Exception as exc:
            self._warn(f"Plugin {plugin_name} failed to register rules: {exc}", exc_info=True)
            return []

        if rules is None:
            return []
        if not isinstance(rules, list):
            self._warn(f"Plugin {plugin_name} returned non-list rule registrations")
            return []

        accepted: list[tuple[str, UpdateRule]] = []
        for rule in rules:
            if not isinstance(rule, UpdateRule):
                self._warn(f"Plugin {plugin_name} registered a non-rule: {rule!r}")
                continue
            try:
                rule_name = rule.name
            except Exception as exc:
                self._warn(
                    f"Plugin {plugin_name} registered an unnamed rule: {exc}", exc_info=True
                )
                continue
            accepted.append((rule_name, rule))
            logger.debug("Collected rule %s from plugin %s", rule_name, plugin_name)
        return accepted

    # ------------------------------------------------------------------
    # Entry-point normalization
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception as exc:
                self._warn(
                    f"Failed to instantiate entry-point plugin {plugin_name}: {exc}",
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
