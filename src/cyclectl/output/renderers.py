"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cyclectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from cyclectl.services.result import ServiceResult

    type _Renderer = Callable[..., None]


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "result" in result.data:
        return str(result.data["result"]).lower()
    if "has_cycle" in result.data:
        return str(result.data["has_cycle"]).lower()
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cyc.ok"), Text(f"  {result.op}", style="cyc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="cyc.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style="cyc.true" if value else "cyc.false")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    extras = ", ".join(f"{k}={v}" for k, v in span.get("annotations", {}).items())
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    if extras:
        line += f"  ({extras})"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cyc.error"), Text(f"  {result.op} — ", style="cyc.op"), Text(msg)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_procedure(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("result", "vertices", "edges"):
        _field(console, key, result.data.get(key))
    if verbose:
        _field(console, "vertex_ids", result.data.get("vertex_ids", []))
        _field(console, "edge_pairs", result.data.get("edge_pairs", []))
        _render_meta(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="cyc.id", no_wrap=True, justify="right")
    table.add_column("Name", style="cyc.name")
    table.add_column("Label")
    table.add_column("Out")

    for item in result.data.get("items", []):
        targets = ", ".join(str(e["target_id"]) for e in item.get("out", []))
        table.add_row(str(item["id"]), Text(item["name"]), Text(item["label"]), targets)

    console.print(table)
    count, edge_total = result.data.get("count", 0), result.data.get("edges", 0)
    console.print(f"\n{count} vertices, {edge_total} edges")
    if verbose:
        _render_meta(console, result)


def _render_cycles(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "has_cycle", result.data.get("has_cycle", False))
    for item in result.data.get("items", []):
        path = " -> ".join(item["names"] + item["names"][:1])
        console.print(Text(f"  {path}"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "create_and_check": _render_procedure,
    "show": _render_show,
    "cycles": _render_cycles,
    "stats": _render_generic,
}
