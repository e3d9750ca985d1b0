"""Build timing spans for ``--verbose`` output.

A service method decorated with :func:`traced` opens a root span; the
builder opens ``resolve``, ``compose`` and ``write`` stages beneath it with
:func:`trace_span`. When the method returns a ServiceResult, the finished
tree lands in ``result.meta["telemetry"]``.

Tracing is off unless :func:`enable_telemetry` has been called in the
current context, so the disabled path is one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from scaffoldctl.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("scaffoldctl_telemetry", default=False)
_current_span: ContextVar[Span | None] = ContextVar("scaffoldctl_span", default=None)

_log = structlog.get_logger("scaffoldctl.telemetry")

_P = ParamSpec("_P")
_R = TypeVar("_R")


@dataclass
class Span:
    """One timed stage of an operation."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        # An unfinished span reports zero rather than a running total.
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            node["annotations"] = self.annotations
        if self.children:
            node["children"] = [child.to_dict() for child in self.children]
        return node


@contextmanager
def _activated(span: Span) -> Iterator[Span]:
    """Make *span* current for the block, closing it on the way out."""
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a stage beneath the active span.

    Outside a traced call (or with tracing off) the block still runs and
    receives ``None``, so callers can annotate conditionally.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    stage = Span(name=name, parent=parent)
    parent.children.append(stage)
    with _activated(stage):
        yield stage


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Open a root span around *func* and attach the tree to its result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        outcome: Any = None
        ok = False
        try:
            with _activated(root):
                outcome = func(*args, **kwargs)
            ok = outcome.ok if isinstance(outcome, ServiceResult) else True
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 2),
                stages=[child.name for child in root.children],
                ok=ok,
            )

        if isinstance(outcome, ServiceResult):
            meta = {**(outcome.meta or {}), "telemetry": root.to_dict()}
            outcome = outcome.model_copy(update={"meta": meta})
        return outcome  # type: ignore[no-any-return]

    return wrapper


def enable_telemetry() -> None:
    """Turn tracing on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """Return the innermost active span, or ``None`` when tracing is off."""
    return _current_span.get() if _enabled.get() else None
