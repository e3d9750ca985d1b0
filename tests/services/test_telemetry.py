"""Tests for Span, trace_span, and @traced, including the build span tree."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from scaffoldctl.infrastructure.workspace import Workspace
from scaffoldctl.services.result import ErrorCode, ServiceResult
from scaffoldctl.services.scaffold import ScaffoldService
from scaffoldctl.services.telemetry import (
    Span,
    _current_span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_span() -> Generator[None]:
    yield
    _current_span.set(None)


@pytest.fixture
def _telemetry_on() -> None:
    enable_telemetry()


# ── Span ─────────────────────────────────────────────────────────────


class TestSpan:
    def test_open_span_has_zero_duration(self) -> None:
        assert Span(name="s").duration_ms == 0.0

    def test_to_dict_omits_empty_sections(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert d["duration_ms"] >= 0
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_nests_children_and_annotations(self) -> None:
        root = Span(name="root")
        child = Span(name="write", parent=root)
        root.children.append(child)
        child.annotate("files", 3)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0] == {
            "name": "write",
            "duration_ms": d["children"][0]["duration_ms"],
            "annotations": {"files": 3},
        }


# ── trace_span ───────────────────────────────────────────────────────


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_without_parent_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_child_attached_and_closed(self) -> None:
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("compose") as span:
                assert span is not None
                assert get_current_span() is span
            assert root.children[0].name == "compose"
            assert root.children[0].end_time is not None
            assert get_current_span() is root
        finally:
            _current_span.reset(token)


# ── @traced ──────────────────────────────────────────────────────────


class TestTraced:
    def test_noop_when_disabled(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_meta_merged(self) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("stage"):
                pass
            return ServiceResult(ok=True, op="op", meta={"kept": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["kept"] == 1
        assert result.meta["telemetry"]["children"][0]["name"] == "stage"

    @pytest.mark.usefixtures("_telemetry_on")
    def test_failure_result_still_traced(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult.failure("op", ErrorCode.BUILD_FAILED, "nope")

        result = op()
        assert result.meta is not None
        assert "telemetry" in result.meta

    @pytest.mark.usefixtures("_telemetry_on")
    def test_exception_propagates_and_resets_span(self) -> None:
        @traced
        def op() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            op()
        assert _current_span.get() is None

    @pytest.mark.usefixtures("_telemetry_on")
    def test_plain_return_untouched(self) -> None:
        @traced
        def op() -> int:
            return 7

        assert op() == 7


class TestBuildSpanTree:
    @pytest.mark.usefixtures("_telemetry_on")
    def test_build_project_stages(self, workspace: Workspace) -> None:
        result = ScaffoldService(workspace).build_project("demo", "vite")

        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "ScaffoldService.build_project"
        names = [child["name"] for child in tree["children"]]
        assert names == ["resolve", "compose", "write"]
        compose = tree["children"][1]
        assert compose["annotations"]["files"] == result.data["file_count"]

    def test_build_project_without_telemetry(self, workspace: Workspace) -> None:
        assert ScaffoldService(workspace).build_project("demo", "vite").meta is None
