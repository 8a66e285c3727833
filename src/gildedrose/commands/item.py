"""Command: inspect one catalog item by position."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose item 0
  gildedrose item 2 --days 3
  gildedrose --json item 9 --days 5""",
)
@click.argument("index", type=int)
@click.option("--days", type=int, default=0, show_default=True, help="Days to age first.")
@click.pass_obj
def item(app: AppContext, index: int, days: int) -> None:
    """Show the item at INDEX (0-based) after aging the catalog --days times."""
    from gildedrose.services.inventory import InventoryService

    app.emit(InventoryService(app.inventory, app.plugins).get_item(index, days=days))
