"""MCP server factory.

The ``mcp`` package comes with the optional ``scaffoldctl[mcp]`` extra;
``mcp_available`` tells callers whether it is importable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(
    *,
    base_dir: Path | None = None,
    config_path: str | None = None,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Return a FastMCP server with the scaffoldctl tools registered.

    Settings come from *config_path* or discovery from *base_dir*, and
    plugins are loaded once for the life of the server. *host* and *port*
    only matter for the HTTP transports.

    Raises:
        RuntimeError: the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install scaffoldctl[mcp]"
        raise RuntimeError(msg)

    from scaffoldctl.config.settings import ScaffoldSettings
    from scaffoldctl.infrastructure.workspace import Workspace
    from scaffoldctl.mcp.tools import register_tools

    settings = ScaffoldSettings.from_cli(config_path=config_path, base_dir=base_dir)
    workspace = Workspace(settings)
    workspace.init_plugins()
    # Builders and their template environments exist before any tool call.
    logger.debug("Serving %d framework families", len(workspace.registry))

    server = _FastMCP("scaffoldctl", host=host, port=port)
    register_tools(server, workspace)
    return server
