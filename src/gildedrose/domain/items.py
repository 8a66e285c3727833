"""Item entity and catalog constants.

INVARIANT: ``quality`` is always within ``[MIN_QUALITY, MAX_QUALITY]``
except for the legendary item, which is pinned to ``LEGENDARY_QUALITY``.

There is exactly one mutation path: the ``quality`` setter clamps, and
``decrement_sell_in()`` is the only way rules move ``sell_in``. Both are
no-ops for the legendary item.
"""

from __future__ import annotations

from typing import Any

from gildedrose.domain.errors import InvalidConstruction

# --- Item names with special aging rules ---

LEGENDARY_NAME = "Sulfuras, Hand of Ragnaros"
AGED_BRIE_NAME = "Aged Brie"
BACKSTAGE_PASS_NAME = "Backstage passes to a TAFKAL80ETC concert"
CONJURED_PREFIX = "Conjured"

# --- Quality bounds ---

MIN_QUALITY = 0
MAX_QUALITY = 50
LEGENDARY_QUALITY = 80


def is_legendary_name(name: str) -> bool:
    """Return True if *name* identifies the legendary item."""
    return name == LEGENDARY_NAME


def clamp_quality(value: int) -> int:
    """Saturate *value* into ``[MIN_QUALITY, MAX_QUALITY]``."""
    return max(MIN_QUALITY, min(MAX_QUALITY, value))


class Item:
    """A catalog entry aged once per tick by exactly one rule.

    Args:
        name: Non-blank item name. Checked at construction only.
        sell_in: Days remaining before the sell-by date. May go negative.
        quality: Initial quality. Must be in ``[0, 50]`` unless the item is
            legendary, in which case any non-negative value is replaced
            by ``80``.

    Raises:
        InvalidConstruction: On a blank name, a non-integer ``sell_in`` or
            ``quality``, or an out-of-range quality.
    """

    __slots__ = ("name", "sell_in", "_quality")

    def __init__(self, name: str, sell_in: int, quality: int) -> None:
        self.name = _validate_name(name)
        self.sell_in = _validate_int("sell_in", sell_in)
        self._quality = _validate_quality(quality, name)

    @property
    def is_legendary(self) -> bool:
        return is_legendary_name(self.name)

    @property
    def quality(self) -> int:
        return self._quality

    @quality.setter
    def quality(self, value: int) -> None:
        if self.is_legendary:
            return
        self._quality = clamp_quality(value)

    def decrement_sell_in(self) -> None:
        """Move one day closer to (or further past) the sell-by date."""
        if not self.is_legendary:
            self.sell_in -= 1

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "sell_in": self.sell_in, "quality": self.quality}

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"

    def __repr__(self) -> str:
        return f"Item(name={self.name!r}, sell_in={self.sell_in}, quality={self.quality})"


def _validate_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidConstruction("Item name must be a non-empty string")
    return name


def _validate_int(field: str, value: int) -> int:
    # Reject bool even though it subclasses int.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConstruction(f"Item {field} must be an integer, got {value!r}")
    return value


def _validate_quality(quality: int, name: str) -> int:
    _validate_int("quality", quality)
    if quality < MIN_QUALITY:
        raise InvalidConstruction(f"Quality cannot be negative, got {quality}")

    # Legendary quality is fixed regardless of the supplied value.
    if is_legendary_name(name):
        return LEGENDARY_QUALITY

    if quality > MAX_QUALITY:
        raise InvalidConstruction(f"Quality cannot exceed {MAX_QUALITY}, got {quality}")
    return quality
