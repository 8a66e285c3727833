"""Tests for PluginManager — registration, hook relay, and rule installation."""

from __future__ import annotations

from typing import Any

import pluggy
import pytest

from gildedrose.domain.inventory import Inventory
from gildedrose.domain.items import Item
from gildedrose.domain.rules import UpdateRule
from gildedrose.plugins.manager import ENTRY_POINT_GROUP, PluginManager

hookimpl = pluggy.HookimplMarker("gildedrose")


class _FrozenRule(UpdateRule):
    """Stops aging for items named exactly *target*."""

    def __init__(self, target: str) -> None:
        self.target = target

    @property
    def name(self) -> str:
        return f"frozen:{self.target}"

    def can_handle(self, item: Item) -> bool:
        return item.name == self.target

    def apply(self, item: Item) -> None:
        pass


class _DummyPlugin:
    @hookimpl
    def post_tick(self, day: int, items: list[dict[str, Any]]) -> None:
        pass


class _RulePlugin:
    @hookimpl
    def register_rules(self) -> list[UpdateRule]:
        return [_FrozenRule("Widget"), _FrozenRule("Gadget")]


class _NonListPlugin:
    @hookimpl
    def register_rules(self) -> Any:
        return _FrozenRule("Widget")


class _MixedPlugin:
    @hookimpl
    def register_rules(self) -> list[Any]:
        return ["not a rule", _FrozenRule("Gadget")]


class _RaisingPlugin:
    @hookimpl
    def register_rules(self) -> list[UpdateRule]:
        raise RuntimeError("boom")


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "register_rules")
        assert hasattr(pm.hook, "post_tick")

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin(), name="dummy")
        assert "dummy" in pm.list_plugin_names()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_DummyPlugin())
        assert "_DummyPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _DummyPlugin()
        pm.register_plugin(plugin, name="dummy")
        pm.unregister(plugin)
        assert "dummy" not in pm.list_plugin_names()
        assert pm.get_plugins() == []

    def test_is_loaded(self) -> None:
        pm = PluginManager()
        assert pm.is_loaded is False
        pm.discover_and_load()
        assert pm.is_loaded is True

    def test_entry_point_group(self) -> None:
        assert ENTRY_POINT_GROUP == "gildedrose.plugins"


class TestInstallRules:
    def test_rules_installed_at_top_priority(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_RulePlugin())
        inventory = Inventory([Item("Widget", 5, 10), Item("Gadget", 5, 10)])

        installed = pm.install_rules(inventory)

        assert installed == ["frozen:Widget", "frozen:Gadget"]
        names = [rule.name for rule in inventory.registry.rules]
        assert names[:2] == ["frozen:Gadget", "frozen:Widget"]
        inventory.tick()
        assert [(i.sell_in, i.quality) for i in inventory.items if i] == [(5, 10), (5, 10)]

    def test_no_plugins(self) -> None:
        inventory = Inventory([])
        assert PluginManager().install_rules(inventory) == []
        assert inventory.registry.rule_count == 5

    @pytest.mark.parametrize("plugin", [_NonListPlugin(), _RaisingPlugin()])
    def test_bad_registrations_skipped(self, plugin: object) -> None:
        pm = PluginManager()
        pm.register_plugin(plugin)
        inventory = Inventory([])
        assert pm.install_rules(inventory) == []
        assert inventory.registry.rule_count == 5

    def test_non_rules_filtered(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_MixedPlugin())
        inventory = Inventory([])
        assert pm.install_rules(inventory) == ["frozen:Gadget"]


class _UnnamedRule(_FrozenRule):
    @property
    def name(self) -> str:
        raise AttributeError("no name")


class _UnnamedRulePlugin:
    @hookimpl
    def register_rules(self) -> list[UpdateRule]:
        return [_UnnamedRule("Widget"), _FrozenRule("Gadget")]


class TestInstallWarnings:
    def test_raising_hook_becomes_warning(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_RaisingPlugin(), name="raising")
        pm.install_rules(Inventory([]))
        assert pm.drain_warnings() == ["Plugin raising failed to register rules: boom"]
        assert pm.drain_warnings() == []

    def test_non_list_becomes_warning(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_NonListPlugin(), name="nonlist")
        pm.install_rules(Inventory([]))
        assert pm.drain_warnings() == ["Plugin nonlist returned non-list rule registrations"]

    def test_non_rule_becomes_warning(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_MixedPlugin(), name="mixed")
        pm.install_rules(Inventory([]))
        assert pm.drain_warnings() == ["Plugin mixed registered a non-rule: 'not a rule'"]

    def test_rule_with_raising_name_skipped(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_UnnamedRulePlugin(), name="unnamed")
        inventory = Inventory([Item("Widget", 5, 10)])

        assert pm.install_rules(inventory) == ["frozen:Gadget"]
        assert inventory.registry.rule_count == 6
        assert pm.drain_warnings() == ["Plugin unnamed registered an unnamed rule: no name"]

    def test_clean_plugins_leave_no_warnings(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_RulePlugin())
        pm.install_rules(Inventory([]))
        assert pm.drain_warnings() == []
