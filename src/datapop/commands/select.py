"""Command group: read and replace the document selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.commands._base import DpGroup
from datapop.services.selection import SelectionService

if TYPE_CHECKING:
    from datapop.commands._context import AppContext

_SELECT_EXAMPLES = """\
  datapop select show
  datapop select set 1A2B3C4D-... 5E6F7A8B-...
  datapop -q select show"""


@click.group(cls=DpGroup, examples=_SELECT_EXAMPLES)
def select() -> None:
    """Show or replace the selected layers."""


@select.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """List the selected layers."""
    app.emit(SelectionService(app.workspace).get())


@select.command(name="set")
@click.argument("layer_ids", nargs=-1, required=True)
@click.pass_obj
def set_(app: AppContext, layer_ids: tuple[str, ...]) -> None:
    """Replace the selection with LAYER_IDS, in order."""
    app.emit(SelectionService(app.workspace).set(list(layer_ids)))
