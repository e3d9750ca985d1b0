"""``scaffoldctl serve``: run the MCP server (needs the scaffoldctl[mcp] extra)."""

from __future__ import annotations

import click

from scaffoldctl.commands._base import ScaffoldCommand


@click.command(
    cls=ScaffoldCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  scaffoldctl serve

  # Streamable HTTP on custom host/port
  scaffoldctl serve --transport streamable-http --host 0.0.0.0 --port 9000

  # SSE transport on the [mcp] address from scaffoldctl.toml
  scaffoldctl serve --transport sse""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: object, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server (requires scaffoldctl[mcp] extra)."""
    from scaffoldctl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install scaffoldctl[mcp]", err=True)
        raise SystemExit(1)

    from scaffoldctl.commands._context import AppContext

    assert isinstance(app, AppContext)
    mcp = app.settings.mcp
    config_path = app.settings.config_path
    server = create_server(
        base_dir=app.settings.base_dir,
        config_path=str(config_path) if config_path is not None else None,
        host=host or mcp.host,
        port=port if port is not None else mcp.port,
    )
    server.run(transport=transport or mcp.transport)
