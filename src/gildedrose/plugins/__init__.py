"""Plugin system — pluggy hook specs and the plugin manager.

Plugins implement hooks with ``pluggy.HookimplMarker("gildedrose")``::

    hookimpl = pluggy.HookimplMarker("gildedrose")

    class CheeseRules:
        @hookimpl
        def register_rules(self):
            return [GoudaRule()]
"""
