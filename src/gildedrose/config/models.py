"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gildedrose.toml only contains
overrides. With no config file at all the demonstration catalog is used.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gildedrose.domain.items import Item

# --- gildedrose.toml sections ---


class ItemSpec(BaseModel):
    """One ``[[catalog.items]]`` entry: the initial ``(name, sell_in, quality)`` triple."""

    model_config = {"frozen": True}

    name: str
    sell_in: int
    quality: int

    def to_item(self) -> Item:
        """Build the domain item. Raises ``InvalidConstruction`` on bad values."""
        return Item(self.name, self.sell_in, self.quality)


def _demo_catalog() -> list[ItemSpec]:
    triples = [
        ("+5 Dexterity Vest", 10, 20),
        ("Elixir of the Mongoose", 5, 7),
        ("Aged Brie", 2, 0),
        ("Sulfuras, Hand of Ragnaros", 0, 80),
        ("Sulfuras, Hand of Ragnaros", -1, 80),
        ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
        ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
        ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
        ("Backstage passes to a TAFKAL80ETC concert", 1, 30),
        ("Conjured Mana Cake", 3, 6),
        ("Conjured Health Potion", 1, 10),
    ]
    return [ItemSpec(name=n, sell_in=s, quality=q) for n, s, q in triples]


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    items: list[ItemSpec] = Field(default_factory=_demo_catalog)


class SimulationConfig(BaseModel):
    """[simulation] section."""

    model_config = {"frozen": True}

    days: int = 4

    @field_validator("days")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            msg = "simulation.days must be >= 0"
            raise ValueError(msg)
        return value


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

