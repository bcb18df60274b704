"""Click command classes for datapop with on-demand usage examples.

``--help`` stays short and ends with a pointer to ``--examples``, which
prints the command's example invocations and exits without loading a
document.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples to see sample invocations."


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples`` text is given."""

    params: list[click.Parameter]
    epilog: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples is None:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )
        self.epilog = f"{self.epilog}\n\n{EXAMPLES_HINT}" if self.epilog else EXAMPLES_HINT

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)


class DpCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DpGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`DpCommand` by default."""

    command_class = DpCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
