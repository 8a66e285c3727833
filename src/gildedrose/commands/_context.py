"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy inventory construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gildedrose.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gildedrose.config.settings import RoseSettings
    from gildedrose.domain.inventory import Inventory
    from gildedrose.plugins.manager import PluginManager
    from gildedrose.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The inventory is lazily
    built on first use so ``--help`` and ``--version`` never validate the
    catalog or load plugins.
    """

    def __init__(self, settings: RoseSettings) -> None:
        self.settings = settings
        self._inventory: Inventory | None = None
        self._plugins: PluginManager | None = None

        # Configure structured logging
        from gildedrose.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points discovered on first access)."""
        if self._plugins is None:
            from gildedrose.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load()
        return self._plugins

    @property
    def inventory(self) -> Inventory:
        """The configured catalog (built lazily on first access).

        An invalid catalog entry is emitted as an error result and exits 1.
        """
        if self._inventory is None:
            from gildedrose.domain.errors import InvalidConstruction
            from gildedrose.services.inventory import build_inventory, load_failure

            try:
                inventory = build_inventory(self.settings.catalog.items)
            except InvalidConstruction as exc:
                self.emit(load_failure(exc))
                raise  # pragma: no cover - emit() exits
            self.plugins.install_rules(inventory)
            self._inventory = inventory
        return self._inventory

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
