"""Subcommand modules for scaffoldctl.

Provides register_commands() which uses deferred imports to keep
``scaffoldctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from scaffoldctl.commands.frameworks import frameworks

    cli.add_command(frameworks)

    # --- Standalone commands ---
    from scaffoldctl.commands.build import build
    from scaffoldctl.commands.serve import serve

    cli.add_command(build)
    cli.add_command(serve)
