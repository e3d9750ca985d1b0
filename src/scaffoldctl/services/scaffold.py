"""ScaffoldService: request validation, builder dispatch, framework discovery.

The dispatcher between the adapters (CLI, MCP) and the framework
registry. Structural problems (bad request, unknown framework) are
rejected before any filesystem activity; everything after that is
reported through the builder's outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from scaffoldctl.domain.project import ProjectRequest
from scaffoldctl.frameworks.registry import UnknownFrameworkError
from scaffoldctl.services.base import BaseService
from scaffoldctl.services.result import ErrorCode, ServiceResult
from scaffoldctl.services.telemetry import traced

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def _validation_errors(exc: ValidationError) -> list[dict[str, str]]:
    errors = []
    for err in exc.errors():
        message = str(err["msg"]).removeprefix(_VALUE_ERROR_PREFIX)
        errors.append({"field": ".".join(str(p) for p in err["loc"]), "message": message})
    return errors


class ScaffoldService(BaseService):
    """Build projects and answer discovery queries against the registry."""

    @traced
    def build_project(
        self,
        name: Any,
        framework: Any,
        *,
        options: Any = None,
        target_root: str | Path | None = None,
    ) -> ServiceResult:
        """Validate a request, dispatch it to its builder, relay the outcome.

        ``[build] options`` from settings are merged beneath *options*, so a
        request can always override a configured default.
        """
        op = "build_project"

        if options is not None and not isinstance(options, Mapping):
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_REQUEST,
                "Options must be an object of key/value pairs",
                detail={"received": type(options).__name__},
            )
        declared = {**self._workspace.settings.build.options, **(options or {})}

        try:
            request = ProjectRequest(
                name=name,
                family_id=framework,
                declared_options=declared,
                target_root=target_root,
            )
        except ValidationError as exc:
            errors = _validation_errors(exc)
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_REQUEST,
                f"Invalid request: {errors[0]['message']}",
                detail={"errors": errors},
            )

        try:
            builder = self._workspace.registry.require(request.family_id)
        except UnknownFrameworkError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_FRAMEWORK,
                str(exc),
                detail={"framework": exc.identifier, "supported": exc.supported},
            )

        logger.debug("Building %s project %r", builder.name, request.name)
        outcome = builder.build(
            request,
            self._workspace.filesystem,
            base_dir=self._workspace.output_root,
        )
        if not outcome.success:
            return ServiceResult.failure(
                op,
                ErrorCode.BUILD_FAILED,
                outcome.message,
                detail={
                    "framework": builder.name,
                    "project_root": outcome.project_root,
                    "error": outcome.failure,
                },
            )

        warnings = list(outcome.warnings)
        self._notify_plugins(
            "post_build",
            warnings,
            framework=builder.name,
            project_root=outcome.project_root,
            files=list(outcome.produced_paths),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "message": outcome.message,
                "name": request.name,
                "framework": builder.name,
                "label": builder.label,
                "project_root": outcome.project_root,
                "files": list(outcome.produced_paths),
                "file_count": len(outcome.produced_paths),
            },
            warnings=warnings,
        )

    def list_frameworks(self, *, grouped: bool = True) -> ServiceResult:
        """Enumerate registered identifiers without building anything."""
        registry = self._workspace.registry
        data: dict[str, Any] = {
            "frameworks": registry.list_identifiers(),
            "count": len(registry.list_identifiers()),
        }
        if grouped:
            data["groups"] = registry.grouped()
        return ServiceResult(ok=True, op="list_frameworks", data=data)

    def describe_framework(self, framework: str) -> ServiceResult:
        """Option schema, aliases, and presets of the family behind *framework*."""
        op = "describe_framework"
        try:
            builder = self._workspace.registry.require(framework)
        except UnknownFrameworkError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.UNKNOWN_FRAMEWORK,
                str(exc),
                detail={"framework": exc.identifier, "supported": exc.supported},
            )

        family = builder.family
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": family.name,
                "label": family.label,
                "category": str(family.category),
                "aliases": list(family.aliases),
                "options": [spec.describe() for spec in family.options],
                "presets": {alias: dict(values) for alias, values in family.presets.items()},
            },
        )
