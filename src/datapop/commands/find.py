"""Command: find layers by name, kind and exclusion rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.commands._base import DpCommand
from datapop.domain.kinds import LayerKind
from datapop.services.layers import LayerService

if TYPE_CHECKING:
    from datapop.commands._context import AppContext


@click.command(
    cls=DpCommand,
    examples="""\
  datapop find Title
  datapop find Title --exact --kind text
  datapop find "*" --kind shape --root 1A2B3C4D-...
  datapop find Card --children --exclude 5E6F7A8B-...
  datapop --json find Avatar --first""",
)
@click.argument("name", required=False)
@click.option("--exact/--like", "exact_match", default=None, help="Exact name or substring match.")
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in LayerKind]),
    default=None,
    help="Restrict to one layer kind ('shape' covers all shapes).",
)
@click.option("--root", "root_ids", multiple=True, help="Search below this layer id (repeatable).")
@click.option(
    "--subtree/--children",
    "subtree_only",
    default=None,
    help="Search all descendants or only immediate children.",
)
@click.option("--exclude", "exclude_ids", multiple=True, help="Never return this layer id (repeatable).")
@click.option("--first", is_flag=True, help="Return only the first match.")
@click.pass_obj
def find(
    app: AppContext,
    name: str | None,
    exact_match: bool | None,
    kind: str | None,
    root_ids: tuple[str, ...],
    subtree_only: bool | None,
    exclude_ids: tuple[str, ...],
    first: bool,
) -> None:
    """Find layers in the current page (or below --root layers)."""
    svc = LayerService(app.workspace)
    method = svc.find_one if first else svc.find
    result = method(
        name,
        exact_match=exact_match,
        kind=kind,
        root_ids=list(root_ids),
        subtree_only=subtree_only,
        exclude_ids=list(exclude_ids),
    )
    app.emit(result)
