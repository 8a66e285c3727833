"""Command: list aging rules in priority order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.commands._base import RoseCommand

if TYPE_CHECKING:
    from gildedrose.commands._context import AppContext


@click.command(
    cls=RoseCommand,
    examples="""\
  gildedrose rules
  gildedrose -v rules
  gildedrose --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List aging rules in the order they are tried (first match wins)."""
    from gildedrose.services.inventory import InventoryService

    app.emit(InventoryService(app.inventory, app.plugins).list_rules())
