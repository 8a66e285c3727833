"""Aging rule ABC and the built-in rules.

Each rule pairs a predicate on the item name with an in-place update.
Rules are stateless: they carry only constant thresholds and are shared
by every item of their kind.

All thresholds compare against the *post-decrement* ``sell_in``.
Quality changes go through :attr:`Item.quality`, which clamps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gildedrose.domain.items import (
    AGED_BRIE_NAME,
    BACKSTAGE_PASS_NAME,
    CONJURED_PREFIX,
    LEGENDARY_NAME,
)

if TYPE_CHECKING:
    from gildedrose.domain.items import Item


class UpdateRule(ABC):
    """Abstract base class for item aging rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule identifier (e.g. 'aged-brie', 'regular')."""
        ...

    @abstractmethod
    def can_handle(self, item: Item) -> bool:
        """Return True if this rule ages *item*."""
        ...

    @abstractmethod
    def apply(self, item: Item) -> None:
        """Age *item* by one day, mutating it in place."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# ---------------------------------------------------------------------------
# Concrete rules
# ---------------------------------------------------------------------------


class SulfurasRule(UpdateRule):
    """The legendary item never ages: neither ``sell_in`` nor ``quality`` move."""

    @property
    def name(self) -> str:
        return "sulfuras"

    def can_handle(self, item: Item) -> bool:
        return item.name == LEGENDARY_NAME

    def apply(self, item: Item) -> None:
        pass


class AgedBrieRule(UpdateRule):
    """Aged Brie gains quality with age, twice as fast once expired."""

    QUALITY_INCREASE = 1
    EXPIRED_QUALITY_INCREASE = 2

    @property
    def name(self) -> str:
        return "aged-brie"

    def can_handle(self, item: Item) -> bool:
        return item.name == AGED_BRIE_NAME

    def apply(self, item: Item) -> None:
        item.decrement_sell_in()
        if item.sell_in < 0:
            item.quality += self.EXPIRED_QUALITY_INCREASE
        else:
            item.quality += self.QUALITY_INCREASE


class BackstagePassRule(UpdateRule):
    """Backstage passes gain value as the concert nears, then drop to zero.

    +1 per day, +2 at ten days or fewer, +3 at five days or fewer.
    Worthless once the concert has passed.
    """

    NEAR_THRESHOLD = 10
    IMMINENT_THRESHOLD = 5
    BASE_INCREASE = 1
    NEAR_BONUS = 1
    IMMINENT_BONUS = 2

    @property
    def name(self) -> str:
        return "backstage-pass"

    def can_handle(self, item: Item) -> bool:
        return item.name == BACKSTAGE_PASS_NAME

    def apply(self, item: Item) -> None:
        item.decrement_sell_in()
        if item.sell_in < 0:
            item.quality = 0
            return
        item.quality += self.quality_increase(item.sell_in)

    def quality_increase(self, days_until_concert: int) -> int:
        """Quality gained for a pass with *days_until_concert* days left."""
        increase = self.BASE_INCREASE
        if days_until_concert <= self.IMMINENT_THRESHOLD:
            increase += self.IMMINENT_BONUS
        elif days_until_concert <= self.NEAR_THRESHOLD:
            increase += self.NEAR_BONUS
        return increase


class ConjuredRule(UpdateRule):
    """Conjured items degrade twice as fast as regular items."""

    QUALITY_DECREASE = 2
    EXPIRED_QUALITY_DECREASE = 4

    @property
    def name(self) -> str:
        return "conjured"

    def can_handle(self, item: Item) -> bool:
        return item.name.startswith(CONJURED_PREFIX)

    def apply(self, item: Item) -> None:
        item.decrement_sell_in()
        if item.sell_in < 0:
            item.quality -= self.EXPIRED_QUALITY_DECREASE
        else:
            item.quality -= self.QUALITY_DECREASE


class RegularRule(UpdateRule):
    """Default rule: lose one quality per day, two once expired.

    ``can_handle`` matches anything without special rules, but the
    registry applies this rule as a fallback without asking.
    """

    QUALITY_DECREASE = 1
    EXPIRED_QUALITY_DECREASE = 2

    @property
    def name(self) -> str:
        return "regular"

    def can_handle(self, item: Item) -> bool:
        return not is_special_name(item.name)

    def apply(self, item: Item) -> None:
        item.decrement_sell_in()
        if item.sell_in < 0:
            item.quality -= self.EXPIRED_QUALITY_DECREASE
        else:
            item.quality -= self.QUALITY_DECREASE


def is_special_name(name: str) -> bool:
    """Return True if *name* is aged by one of the non-default built-in rules."""
    return name in (AGED_BRIE_NAME, BACKSTAGE_PASS_NAME, LEGENDARY_NAME) or name.startswith(
        CONJURED_PREFIX
    )


def builtin_rules() -> list[UpdateRule]:
    """Fresh instances of the non-default built-in rules, in priority order."""
    return [SulfurasRule(), AgedBrieRule(), BackstagePassRule(), ConjuredRule()]
