"""The ``scaffoldctl`` entry point: global flags and subcommand wiring."""

from __future__ import annotations

import click

from scaffoldctl import __version__
from scaffoldctl.commands import register_commands
from scaffoldctl.commands._context import AppContext
from scaffoldctl.config.settings import ScaffoldSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="scaffoldctl")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Show file lists, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", help="Use this scaffoldctl.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Scaffold starter projects for web, API and JVM frameworks."""
    ctx.obj = AppContext(ScaffoldSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
