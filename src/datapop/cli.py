"""Root CLI group for datapop with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from datapop import __version__
from datapop.commands import register_commands
from datapop.commands._context import AppContext
from datapop.config.settings import DatapopSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="datapop")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (ids only).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-d",
    "--document",
    "document_path",
    type=click.Path(dir_okay=False, path_type=Path, resolve_path=True),
    default=None,
    help="Document snapshot to operate on.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    document_path: Path | None,
) -> None:
    """datapop — query, grid and select layers of a design document."""
    settings = DatapopSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        document_path=document_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
