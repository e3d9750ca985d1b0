"""Click command and group classes carrying an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints worked invocations for the
command and exits before any other option is processed.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples=`` and registers the eager flag when it is set."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class ScaffoldCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class ScaffoldGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands default to ScaffoldCommand."""

    command_class = ScaffoldCommand
