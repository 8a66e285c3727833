"""Command: age the catalog day by day and print every day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose simulate
  gildedrose simulate --days 10
  gildedrose -q simulate --days 30
  gildedrose --json simulate --days 2""",
)
@click.option(
    "--days",
    type=int,
    default=None,
    help="Days to simulate. Defaults to [simulation] days from config.",
)
@click.pass_obj
def simulate(app: AppContext, days: int | None) -> None:
    """Simulate the catalog from day 0 through --days."""
    from gildedrose.services.inventory import InventoryService

    if days is None:
        days = app.settings.simulation.days
    app.emit(InventoryService(app.inventory, app.plugins).simulate(days))
