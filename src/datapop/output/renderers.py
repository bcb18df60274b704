"""Rich renderers for ServiceResult.

Results carrying ``items`` render as a layer table; results carrying a
single ``layer``/``page``/``symbol`` render as key-value fields; anything
else falls through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from datapop.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from datapop.services.result import ServiceResult

_SINGLE_KEYS = ("layer", "page", "symbol")


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if not result.ok:
        _render_error(result, console)
    elif isinstance(result.data.get("items"), list):
        _render_layer_list(result, console)
    elif any(key in result.data for key in _SINGLE_KEYS):
        _render_single(result, console)
    else:
        _render_generic(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: layer ids, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id"))
    for key in _SINGLE_KEYS:
        single = result.data.get(key)
        if isinstance(single, dict):
            return str(single["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dp.ok"), Text(f"  {result.op}", style="dp.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="dp.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="dp.id")
    elif key == "name":
        v = Text(str(value), style="dp.name")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _fmt_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _layer_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="dp.id", no_wrap=True)
    table.add_column("Name", style="dp.name")
    table.add_column("Kind")
    table.add_column("X", style="dp.coord", justify="right")
    table.add_column("Y", style="dp.coord", justify="right")
    table.add_column("W", justify="right")
    table.add_column("H", justify="right")
    for item in items:
        kind = str(item.get("kind", ""))
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name") or ""),
            Text(kind, style=style_for_kind(kind)),
            _fmt_number(item.get("x", "")),
            _fmt_number(item.get("y", "")),
            _fmt_number(item.get("width", "")),
            _fmt_number(item.get("height", "")),
        )
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="dp.error"), Text(f"  {result.op}", style="dp.op"), " - ", msg, sep="")


def _render_layer_list(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if key != "items":
            _field(console, key, value)
    items = result.data["items"]
    if items:
        console.print(_layer_table(items))


def _render_single(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if key in _SINGLE_KEYS and isinstance(value, dict):
            for field_key, field_value in value.items():
                _field(console, field_key, _fmt_number(field_value))
        elif key in _SINGLE_KEYS:
            _field(console, key, "none")
        else:
            _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
