"""MCP tools: build_project, list_frameworks, describe_framework.

The work happens in plain ``<tool>_impl`` functions, which need no mcp
install to test. :func:`register_tools` exposes them on a FastMCP server.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scaffoldctl.domain.types import ProjectType
from scaffoldctl.services.result import ErrorCode, ServiceResult

# Accepted inside ``options`` as an alias of the output_path argument.
OUTPUT_PATH_OPTION = "outputPath"


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Flatten a ServiceResult, leaving out empty warnings, detail and meta."""
    response = result.model_dump(include={"ok", "op", "data"})
    if result.warnings:
        response["warnings"] = list(result.warnings)
    if result.error is not None:
        error = result.error.model_dump()
        if not error["detail"]:
            del error["detail"]
        response["error"] = error
    if result.meta:
        response["meta"] = result.meta
    return response


def build_project_impl(
    workspace: Any,
    project_name: Any,
    framework: Any,
    *,
    project_type: str = "web",
    options: Any = None,
    output_path: str | None = None,
) -> dict[str, Any]:
    """Scaffold a project and return the serialized result."""
    from scaffoldctl.services.scaffold import ScaffoldService

    op = "build_project"
    kinds = [kind.value for kind in ProjectType]
    if project_type not in kinds:
        result = ServiceResult.failure(
            op,
            ErrorCode.INVALID_REQUEST,
            f"Invalid project type {project_type!r}; expected one of: {', '.join(kinds)}",
            detail={"project_type": project_type, "supported": kinds},
        )
        return _to_mcp_response(result)

    declared = options
    if isinstance(options, Mapping) and OUTPUT_PATH_OPTION in options:
        declared = {k: v for k, v in options.items() if k != OUTPUT_PATH_OPTION}
        output_path = output_path or options[OUTPUT_PATH_OPTION]

    result = ScaffoldService(workspace).build_project(
        project_name,
        framework,
        options=declared,
        target_root=output_path,
    )
    response = _to_mcp_response(result)
    if result.ok:
        response["data"] = {**result.data, "project_type": project_type}
    return response


def list_frameworks_impl(workspace: Any, *, grouped: bool = True) -> dict[str, Any]:
    """List every framework identifier, optionally grouped by category."""
    from scaffoldctl.services.scaffold import ScaffoldService

    return _to_mcp_response(ScaffoldService(workspace).list_frameworks(grouped=grouped))


def describe_framework_impl(workspace: Any, framework: str) -> dict[str, Any]:
    """Describe the options and presets of one framework."""
    from scaffoldctl.services.scaffold import ScaffoldService

    return _to_mcp_response(ScaffoldService(workspace).describe_framework(framework))


def register_tools(server: Any, workspace: Any) -> None:
    """Register the MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def build_project(
        project_name: str,
        framework: str,
        project_type: str = "web",
        options: dict[str, Any] | None = None,
        output_path: str | None = None,
    ) -> dict[str, Any]:
        """Build a new project with the specified framework.

        Call list_frameworks for supported identifiers and
        describe_framework for the options each one accepts.
        ``output_path`` must be absolute; defaults to the configured
        output root.
        """
        return build_project_impl(
            workspace,
            project_name,
            framework,
            project_type=project_type,
            options=options,
            output_path=output_path,
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def list_frameworks(grouped: bool = True) -> dict[str, Any]:
        """List all supported frameworks for project creation."""
        return list_frameworks_impl(workspace, grouped=grouped)

    @server.tool()  # type: ignore[untyped-decorator]
    def describe_framework(framework: str) -> dict[str, Any]:
        """Show the options, defaults, and alias presets of a framework."""
        return describe_framework_impl(workspace, framework)
