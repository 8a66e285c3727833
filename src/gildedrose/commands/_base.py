"""Click command class shared by every gildedrose subcommand.

``RoseCommand`` takes an ``examples`` string and exposes it behind an eager
``--examples`` flag, so ``--help`` stays short and sample invocations
(``gildedrose simulate --days 10`` and the like) are one flag away.
"""

from __future__ import annotations

from typing import Any

import click


class RoseCommand(click.Command):
    """Click Command that prints ``examples`` on ``--examples`` and exits."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
