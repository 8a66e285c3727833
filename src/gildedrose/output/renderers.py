"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gildedrose.output.console import create_console, get_output, style_for_item

if TYPE_CHECKING:
    from rich.console import Console

    from gildedrose.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    One ``name, sell_in, quality`` line per item for catalog results,
    one name per line for rule listings.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "simulate":
        history = result.data.get("history") or [{"items": []}]
        return "\n".join(_item_line(item) for item in history[-1]["items"])
    if result.op == "show_catalog":
        return "\n".join(_item_line(item) for item in result.data.get("items", []))
    if result.op == "get_item":
        return _item_line(result.data)
    if result.op == "list_rules":
        return "\n".join(str(rule.get("name", "")) for rule in result.data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_line(item: dict[str, Any]) -> str:
    return f"{item.get('name', '')}, {item.get('sell_in', '')}, {item.get('quality', '')}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rose.ok")
    op = Text(f"  {result.op}", style="rose.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rose.key")
    if key == "name":
        v = Text(str(value), style=style_for_item(str(value)) or "rose.name")
    elif key in ("sell_in", "quality", "day", "index"):
        v = Text(str(value), style="rose.number")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _catalog_table(items: list[dict[str, Any]], *, title: str | None = None) -> Table:
    """Build a Rich Table for a catalog snapshot."""
    table = Table(title=title, show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", no_wrap=True)
    table.add_column("Sell In", justify="right")
    table.add_column("Quality", justify="right")

    for item in items:
        name = str(item.get("name", ""))
        sell_in = item.get("sell_in", 0)
        sell_in_style = "rose.expired" if isinstance(sell_in, int) and sell_in < 0 else ""
        table.add_row(
            str(item.get("index", "")),
            Text(name, style=style_for_item(name)),
            Text(str(sell_in), style=sell_in_style),
            str(item.get("quality", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rose.error")
    op = Text(f"  {result.op}", style="rose.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render show_catalog results as a single table."""
    items = result.data.get("items", [])
    console.print(_catalog_table(items))
    console.print(f"\n{result.data.get('count', len(items))} items")


def _render_simulation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one table per simulated day, day 0 first."""
    for entry in result.data.get("history", []):
        day = entry.get("day", 0)
        console.print(_catalog_table(entry.get("items", []), title=f"Day {day}"))
        console.print()
    days = result.data.get("days", 0)
    console.print(Text(f"{days} days simulated", style="rose.day"))


def _render_item(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_item results as key-value fields."""
    _status_line(console, result)
    keys = ["index", "day", "name", "sell_in", "quality"]
    if verbose:
        keys.append("rule")
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_rules as a priority-ordered table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Priority", justify="right")
    table.add_column("Rule", style="rose.name")
    if verbose:
        table.add_column("Class", style="dim")

    for rule in result.data.get("items", []):
        name = str(rule.get("name", ""))
        if rule.get("default"):
            name += " (default)"
        row = [str(rule.get("priority", "")), name]
        if verbose:
            row.append(str(rule.get("class", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} rules")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "show_catalog": _render_catalog,
    "simulate": _render_simulation,
    "get_item": _render_item,
    "list_rules": _render_rules,
}
