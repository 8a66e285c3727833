"""Root CLI group for gildedrose with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from gildedrose import __version__
from gildedrose.commands import register_commands
from gildedrose.commands._context import AppContext
from gildedrose.config.settings import RoseSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gildedrose")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Override config file path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """gildedrose — Gilded Rose inventory aging simulator."""
    ctx.ensure_object(dict)
    try:
        settings = RoseSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
