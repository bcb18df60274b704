"""Rich Console factory and theme for datapop output.

Consoles render to a StringIO buffer so renderers keep a
``-> str`` contract. Outside a terminal Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DATAPOP_THEME = Theme(
    {
        "dp.ok": "bold green",
        "dp.error": "bold red",
        "dp.warning": "bold yellow",
        "dp.op": "bold cyan",
        "dp.key": "dim",
        "dp.id": "bold blue",
        "dp.name": "bold",
        "dp.kind.container": "green",
        "dp.kind.text": "yellow",
        "dp.kind.symbol": "magenta",
        "dp.coord": "cyan",
    }
)

_KIND_STYLES: dict[str, str] = {
    "page": "dp.kind.container",
    "artboard": "dp.kind.container",
    "group": "dp.kind.container",
    "text": "dp.kind.text",
    "symbol_master": "dp.kind.symbol",
    "symbol_instance": "dp.kind.symbol",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DATAPOP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    return _KIND_STYLES.get(kind, "")
