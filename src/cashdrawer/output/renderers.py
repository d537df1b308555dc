"""Human-readable output for settle, inventory and replay results.

:func:`render_result` looks up a renderer by ``result.op``; anything
without its own renderer is printed as ``key: value`` lines. Failed
results of every op share one error layout.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cashdrawer.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from cashdrawer.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """The text shown to a cashier for *result*; *verbose* adds the
    meta block and, for replays, the closing inventory."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render a single line for ``--quiet`` mode."""
    if result.error is not None:
        return f"ERROR: {result.op} — {result.error.message}"

    d = result.data
    symbol = d.get("symbol", "")
    if result.op == "settle":
        return f"{d['change']}{symbol}"
    if result.op == "inventory":
        return f"{d['total']}{symbol}"
    if result.op == "replay":
        return f"{d['settled']}/{d['count']} settled"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "drawer.ok"), (f"  {result.op}", "drawer.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a ``Key: value`` line."""
    console.print(Text.assemble((f"{key}: ", "drawer.key"), (str(value), "drawer.amount")))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, telemetry included (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            duration = value.get("duration_ms", 0.0)
            line = f"    [dim]{duration:>8.2f}ms[/dim]  {value.get('name', '?')}"
            annotations = value.get("annotations") or {}
            if annotations:
                line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
            console.print(line)
        else:
            console.print(f"    {key}: {value}")


def _breakdown_lines(console: Console, breakdown: list[dict[str, Any]]) -> None:
    if not breakdown:
        console.print(Text("   no change due", style="drawer.empty"))
        return
    for line in breakdown:
        console.print(
            Text(f"   • {line['label']}:", style="drawer.label"),
            Text(str(line["count"]), style="drawer.count"),
        )


def _inventory_table(rows: list[dict[str, Any]], symbol: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Denomination", style="drawer.label")
    table.add_column("Count", justify="right")
    table.add_column("Subtotal", justify="right", style="drawer.amount")
    for row in rows:
        count_style = "drawer.short" if row["count"] == 0 else ""
        table.add_row(
            row["label"],
            Text(str(row["count"]), style=count_style),
            f"{row['subtotal']}{symbol}",
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    assert err is not None
    console.print(
        Text.assemble(
            ("ERROR", "drawer.error"), (f"  {result.op}", "drawer.op"), " — ", err.message
        )
    )

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Settle renderer ───────────────────────────────────────────────────


def _render_settle(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Price, paid, change, then one bullet per denomination handed back."""
    d = result.data
    symbol = d.get("symbol", "")
    console.print()
    _field(console, "Price", f"{d['price']}{symbol}")
    _field(console, "Paid", f"{d['paid']}{symbol}")
    _field(console, "Change", f"{d['change']}{symbol}")
    console.print()
    console.print(Text("Change details:", style="bold"))
    console.print()
    _breakdown_lines(console, d.get("breakdown", []))
    if verbose:
        _render_meta(console, result)


# ── Inventory renderer ────────────────────────────────────────────────


def _render_inventory(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    symbol = d.get("symbol", "")
    _status_line(console, result)
    console.print(_inventory_table(d.get("inventory", []), symbol))
    _field(console, "Pieces", d.get("pieces", 0))
    _field(console, "Total", f"{d.get('total', '0.00')}{symbol}")
    if verbose:
        _render_meta(console, result)


# ── Replay renderer ───────────────────────────────────────────────────


def _render_replay(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One row per sale, then the closing drawer."""
    d = result.data
    symbol = d.get("symbol", "")
    _status_line(console, result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Price", justify="right")
    table.add_column("Paid", justify="right")
    table.add_column("Outcome")
    table.add_column("Change", justify="right", style="drawer.amount")
    for sale in d.get("sales", []):
        outcome = sale["outcome"]
        if outcome == "success":
            status = Text("settled", style="drawer.ok")
            change = f"{sale['change']}{symbol}"
        elif outcome == "insufficient_payment":
            status = Text(f"short {sale['shortfall']}{symbol}", style="drawer.warning")
            change = "-"
        else:
            status = Text(f"no change ({sale['remainder']}{symbol})", style="drawer.error")
            change = "-"
        table.add_row(
            str(sale["line"]),
            f"{sale['price']}{symbol}",
            f"{sale['paid']}{symbol}",
            status,
            change,
        )
    console.print(table)

    _field(console, "Settled", d.get("settled", 0))
    _field(console, "Failed", d.get("failed", 0))
    _field(console, "Closing total", f"{d.get('total', '0.00')}{symbol}")
    if verbose:
        console.print()
        console.print(_inventory_table(d.get("inventory", []), symbol))
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line, then each data key on its own line."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(Text.assemble((f"  {key}: ", "dim"), str(value)))
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "settle": _render_settle,
    "inventory": _render_inventory,
    "replay": _render_replay,
}
