"""``scaffoldctl build``: scaffold a new project from a framework family."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from scaffoldctl.commands._base import ScaffoldCommand
from scaffoldctl.services.scaffold import ScaffoldService

if TYPE_CHECKING:
    from scaffoldctl.commands._context import AppContext


def _parse_value(raw: str) -> Any:
    """Decode *raw* as JSON (``true``, ``3``, ``"x"``); fall back to the string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _parse_assignments(
    _ctx: click.Context,
    _param: click.Parameter,
    value: tuple[str, ...],
) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for item in value:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {item!r}")
        options[key] = _parse_value(raw)
    return options


def _parse_options_json(
    _ctx: click.Context,
    _param: click.Parameter,
    value: str | None,
) -> dict[str, Any] | None:
    if value is None:
        return None
    try:
        options = json.loads(value)
    except ValueError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}") from exc
    if not isinstance(options, dict):
        raise click.BadParameter(f"must be a JSON object, got {type(options).__name__}")
    return options


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  # React + Vite in ./my-app
  scaffoldctl build my-app -f react

  # Alias presets imply options (vite-ts implies TypeScript)
  scaffoldctl build web -f vite-ts -O tailwind=true

  # Options as one JSON object; -O pairs override it
  scaffoldctl build api -f fastapi --options-json '{"database": "postgresql"}' -O docker=false

  # Into another directory
  scaffoldctl build shop -f spring-webflux -d ~/work""",
)
@click.argument("name")
@click.option("-f", "--framework", required=True, help="Framework identifier or alias.")
@click.option(
    "-O",
    "--option",
    "assignments",
    multiple=True,
    callback=_parse_assignments,
    help="Option as key=value; values are read as JSON when possible (repeatable).",
)
@click.option(
    "--options-json",
    callback=_parse_options_json,
    default=None,
    help="All options as one JSON object.",
)
@click.option(
    "-d",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Parent directory for the project (default: [build] output_root or CWD).",
)
@click.pass_obj
def build(
    app: AppContext,
    name: str,
    framework: str,
    assignments: dict[str, Any],
    options_json: dict[str, Any] | None,
    output_dir: Path | None,
) -> None:
    """Create project NAME using FRAMEWORK."""
    options = options_json
    if assignments:
        options = {**(options or {}), **assignments}

    target_root = output_dir.expanduser().resolve() if output_dir is not None else None
    result = ScaffoldService(app.workspace).build_project(
        name,
        framework,
        options=options,
        target_root=target_root,
    )
    app.emit(result)
