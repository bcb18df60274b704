"""Command group: resolve symbol masters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.commands._base import DpGroup
from datapop.services.symbols import SymbolService

if TYPE_CHECKING:
    from datapop.commands._context import AppContext

_SYMBOL_EXAMPLES = """\
  datapop symbol name "Button/Primary"
  datapop symbol id 9C1D2E3F-...
  datapop --json symbol name Avatar"""


@click.group(cls=DpGroup, examples=_SYMBOL_EXAMPLES)
def symbol() -> None:
    """Resolve symbol masters locally, then from libraries."""


@symbol.command(name="name")
@click.argument("symbol_name")
@click.pass_obj
def by_name(app: AppContext, symbol_name: str) -> None:
    """Resolve a symbol master by name."""
    app.emit(SymbolService(app.workspace).resolve(name=symbol_name))


@symbol.command(name="id")
@click.argument("symbol_id")
@click.pass_obj
def by_id(app: AppContext, symbol_id: str) -> None:
    """Resolve a symbol master by id."""
    app.emit(SymbolService(app.workspace).resolve(symbol_id=symbol_id))
