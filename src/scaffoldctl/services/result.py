"""The value every service operation returns.

Commands render a ServiceResult; MCP tools serialize it. Services report
failure through it rather than raising.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorCode:
    """Stable error codes carried by :class:`ServiceError`."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_FRAMEWORK = "UNKNOWN_FRAMEWORK"
    BUILD_FAILED = "BUILD_FAILED"


class ServiceError(BaseModel):
    """Why an operation failed, keyed by a stable code."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``op`` names the operation (``"build_project"``). ``data`` holds the
    payload of a success, ``error`` the reason for a failure. ``warnings``
    may be present either way. ``meta`` carries the span tree under
    ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            warnings=warnings or [],
        )
