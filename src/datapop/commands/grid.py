"""Command: replace the selected layers with a grid of copies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.commands._base import DpCommand
from datapop.services.grid import GridService

if TYPE_CHECKING:
    from datapop.commands._context import AppContext


@click.command(
    cls=DpCommand,
    examples="""\
  datapop grid --rows 3 --columns 4
  datapop grid --rows 2 --rows-margin 8 --columns 2 --columns-margin 8
  datapop grid --rows 5 --layer 1A2B3C4D-...""",
)
@click.option("--rows", "rows_count", type=int, default=None, help="Number of rows.")
@click.option("--rows-margin", type=float, default=None, help="Space between rows.")
@click.option("--columns", "columns_count", type=int, default=None, help="Number of columns.")
@click.option("--columns-margin", type=float, default=None, help="Space between columns.")
@click.option("--layer", "layer_ids", multiple=True, help="Use these layer ids instead of the selection.")
@click.pass_obj
def grid(
    app: AppContext,
    rows_count: int | None,
    rows_margin: float | None,
    columns_count: int | None,
    columns_margin: float | None,
    layer_ids: tuple[str, ...],
) -> None:
    """Replace the selected layers with a grid of the top-left layer.

    Unset values fall back to the [grid] section of datapop.toml.
    """
    svc = GridService(app.workspace)
    spec = svc.spec_with_defaults(
        rows_count=rows_count,
        rows_margin=rows_margin,
        columns_count=columns_count,
        columns_margin=columns_margin,
    )
    app.emit(svc.create(spec, layer_ids=list(layer_ids)))
