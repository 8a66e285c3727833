"""RuleRegistry — first-match-wins rule dispatch.

Non-default rules are scanned in list order; the first whose
``can_handle`` returns True fires. The default rule fires when nothing
else matched. Exactly one rule fires per ``update()`` call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from gildedrose.domain.errors import InvalidArgument
from gildedrose.domain.rules import RegularRule, UpdateRule, builtin_rules

if TYPE_CHECKING:
    from gildedrose.domain.items import Item

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Ordered rule list plus a default rule.

    Args:
        rules: Non-default rules in priority order. Defaults to the
            built-in rules.
        default: Fallback rule. Defaults to a fresh :class:`RegularRule`.
    """

    def __init__(
        self,
        rules: Iterable[UpdateRule] | None = None,
        default: UpdateRule | None = None,
    ) -> None:
        self._rules: list[UpdateRule] = list(rules) if rules is not None else builtin_rules()
        self._default: UpdateRule = default if default is not None else RegularRule()

    @property
    def rules(self) -> tuple[UpdateRule, ...]:
        """All rules in evaluation order, default last."""
        return (*self._rules, self._default)

    @property
    def default_rule(self) -> UpdateRule:
        return self._default

    @property
    def rule_count(self) -> int:
        """Number of rules including the default."""
        return len(self._rules) + 1

    def add_rule(self, rule: UpdateRule | None) -> None:
        """Register *rule* ahead of every existing rule. ``None`` is ignored."""
        if rule is None:
            return
        self._rules.insert(0, rule)
        logger.debug("Registered rule %s at top priority", rule.name)

    def rule_for(self, item: Item) -> UpdateRule:
        """Return the rule that would age *item*, without applying it."""
        for rule in self._rules:
            if rule.can_handle(item):
                return rule
        return self._default

    def update(self, item: Item | None) -> UpdateRule:
        """Age *item* with the first matching rule and return that rule.

        Raises:
            InvalidArgument: If *item* is None.
        """
        if item is None:
            raise InvalidArgument("Item cannot be None")

        rule = self.rule_for(item)
        rule.apply(item)
        logger.debug("Applied rule %s to %s", rule.name, item)
        return rule
