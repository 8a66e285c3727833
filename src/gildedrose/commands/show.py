"""Command: show the catalog as configured (day 0)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose show
  gildedrose --json show
  gildedrose -c shop.toml show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show every catalog item before any day has passed."""
    from gildedrose.services.inventory import InventoryService

    app.emit(InventoryService(app.inventory, app.plugins).show())
