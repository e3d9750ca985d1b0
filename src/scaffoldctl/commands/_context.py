"""AppContext, the object every command receives through ``@click.pass_obj``.

It owns the settings for the invocation, opens the workspace on demand,
and turns a ServiceResult into output plus an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scaffoldctl.config.logging import configure_logging
from scaffoldctl.output.formatters import OutputSettings, format_result
from scaffoldctl.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from scaffoldctl.config.settings import ScaffoldSettings
    from scaffoldctl.infrastructure.workspace import Workspace
    from scaffoldctl.services.result import ServiceResult


class AppContext:
    """Per-invocation state built by the root group."""

    def __init__(self, settings: ScaffoldSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def output(self) -> OutputSettings:
        s = self.settings
        return OutputSettings(json_output=s.json_output, quiet=s.quiet, verbose=s.verbose)

    @property
    def workspace(self) -> Workspace:
        """Workspace with plugins loaded; ``--help`` and ``--version`` never touch it."""
        if self._workspace is None:
            from scaffoldctl.infrastructure.workspace import Workspace

            workspace = Workspace(self.settings)
            workspace.init_plugins()
            self._workspace = workspace
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits 1.

        Warnings of a successful result are echoed to stderr as
        ``WARNING:`` lines, except under ``--json`` where the payload
        already carries them.
        """
        mode = self.output
        text = format_result(result, settings=mode)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not mode.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
