"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Loads the document snapshot lazily, emits results,
and saves the snapshot after successful mutations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datapop.config.logging import configure_logging
from datapop.infrastructure.snapshot import SnapshotError
from datapop.infrastructure.workspace import Workspace
from datapop.output.formatters import format_result

if TYPE_CHECKING:
    from datapop.config.settings import DatapopSettings
    from datapop.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DatapopSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The loaded workspace. Snapshot problems become Click errors."""
        if self._workspace is None:
            workspace = Workspace(self.settings)
            try:
                workspace.context  # noqa: B018
            except SnapshotError as exc:
                raise click.ClickException(str(exc)) from exc
            self._workspace = workspace
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Save mutations, then output the result with correct exit semantics.

        * Success: stdout; warnings go to stderr outside JSON mode.
        * Failure: stderr, exit code 1.
        """
        if result.ok and result.mutated:
            try:
                self.workspace.save()
            except OSError as exc:
                msg = f"Cannot save document snapshot: {exc}"
                raise click.ClickException(msg) from exc

        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
