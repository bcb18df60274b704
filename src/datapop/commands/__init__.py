"""Subcommand modules for datapop.

Provides register_commands() which uses deferred imports to keep
``datapop --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from datapop.commands.page import page
    from datapop.commands.select import select
    from datapop.commands.symbol import symbol

    cli.add_command(symbol)
    cli.add_command(select)
    cli.add_command(page)

    # --- Standalone commands ---
    from datapop.commands.find import find
    from datapop.commands.grid import grid

    cli.add_command(find)
    cli.add_command(grid)
