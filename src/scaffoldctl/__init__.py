"""scaffoldctl: framework project scaffolding over CLI and MCP."""

__version__ = "0.3.0"
