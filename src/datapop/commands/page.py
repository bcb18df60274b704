"""Command group: find, add and remove pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.commands._base import DpGroup
from datapop.services.pages import PageService

if TYPE_CHECKING:
    from datapop.commands._context import AppContext

_PAGE_EXAMPLES = """\
  datapop page find "Data"
  datapop page find Sym --contains
  datapop page add "Generated"
  datapop page remove 0F1E2D3C-..."""


@click.group(cls=DpGroup, examples=_PAGE_EXAMPLES)
def page() -> None:
    """Manage document pages."""


@page.command(name="find")
@click.argument("name")
@click.option("--contains", is_flag=True, help="Match pages whose name contains NAME.")
@click.pass_obj
def find_page(app: AppContext, name: str, contains: bool) -> None:
    """Find a page by name."""
    app.emit(PageService(app.workspace).find(name, full_match=not contains))


@page.command(name="add")
@click.argument("name")
@click.pass_obj
def add_page(app: AppContext, name: str) -> None:
    """Add a blank page (the current page stays active)."""
    app.emit(PageService(app.workspace).add(name))


@page.command(name="remove")
@click.argument("page_id")
@click.pass_obj
def remove_page(app: AppContext, page_id: str) -> None:
    """Remove a page by id."""
    app.emit(PageService(app.workspace).remove(page_id))
