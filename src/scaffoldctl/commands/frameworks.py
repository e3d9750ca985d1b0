"""Command group: framework discovery (list, describe)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.commands._base import ScaffoldGroup
from scaffoldctl.services.scaffold import ScaffoldService

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext


@click.group(
    cls=ScaffoldGroup,
    examples="""\
  scaffoldctl frameworks list
  scaffoldctl frameworks list --flat
  scaffoldctl frameworks describe nestjs""",
)
def frameworks() -> None:
    """List supported frameworks and their options."""


@frameworks.command(
    "list",
    examples="""\
  scaffoldctl frameworks list
  scaffoldctl --json frameworks list
  scaffoldctl -q frameworks list --flat""",
)
@click.option("--flat", is_flag=True, help="One identifier per line, no category groups.")
@click.pass_obj
def list_cmd(app: AppContext, flat: bool) -> None:
    """List every framework identifier, grouped by category."""
    app.emit(ScaffoldService(app.workspace).list_frameworks(grouped=not flat))


@frameworks.command(
    examples="""\
  scaffoldctl frameworks describe react
  scaffoldctl -v frameworks describe spring-webflux""",
)
@click.argument("framework")
@click.pass_obj
def describe(app: AppContext, framework: str) -> None:
    """Show the options, defaults, and presets of FRAMEWORK."""
    app.emit(ScaffoldService(app.workspace).describe_framework(framework))
