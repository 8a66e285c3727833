"""gildedrose — daily aging of the Gilded Rose inventory."""

__version__ = "0.1.0"
