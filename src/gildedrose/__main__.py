"""Allow ``python -m gildedrose``."""

from gildedrose.cli import cli

cli()
