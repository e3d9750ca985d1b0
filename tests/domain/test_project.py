"""Tests for ProjectRequest, ProjectIdentity, FileNode, and BuildOutcome."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scaffoldctl.domain.project import BuildOutcome, FileNode, ProjectIdentity, ProjectRequest


class TestProjectRequest:
    def test_minimal(self) -> None:
        request = ProjectRequest(name="demo", family_id="vite")
        assert request.declared_options == {}
        assert request.target_root is None

    def test_strips_whitespace(self) -> None:
        request = ProjectRequest(name="  demo ", family_id=" React ")
        assert request.name == "demo"
        assert request.family_id == "React"

    @pytest.mark.parametrize("name", ["", "   ", "a/b", "../up", ".hidden", "my app"])
    def test_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            ProjectRequest(name=name, family_id="vite")

    @pytest.mark.parametrize("name", ["demo", "my-app", "my_app", "app2", "v1.0", "MyApp"])
    def test_accepts_names(self, name: str) -> None:
        assert ProjectRequest(name=name, family_id="vite").name == name

    def test_rejects_empty_framework(self) -> None:
        with pytest.raises(ValidationError, match="Framework must not be empty"):
            ProjectRequest(name="demo", family_id="  ")

    def test_rejects_non_string_name(self) -> None:
        with pytest.raises(ValidationError):
            ProjectRequest(name=None, family_id="vite")  # type: ignore[arg-type]

    def test_rejects_relative_root(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            ProjectRequest(name="demo", family_id="vite", target_root=Path("rel/dir"))

    def test_accepts_absolute_root_as_string(self, tmp_path: Path) -> None:
        request = ProjectRequest(name="demo", family_id="vite", target_root=str(tmp_path))
        assert request.target_root == tmp_path

    def test_frozen(self) -> None:
        request = ProjectRequest(name="demo", family_id="vite")
        with pytest.raises(ValidationError):
            request.name = "other"  # type: ignore[misc]


class TestProjectIdentity:
    @pytest.mark.parametrize(
        ("name", "slug", "snake", "pascal", "camel"),
        [
            ("demo", "demo", "demo", "Demo", "demo"),
            ("my-app", "my-app", "my_app", "MyApp", "myApp"),
            ("MyApp", "my-app", "my_app", "MyApp", "myApp"),
            ("shop_api.v2", "shop-api-v2", "shop_api_v2", "ShopApiV2", "shopApiV2"),
        ],
    )
    def test_forms(self, name: str, slug: str, snake: str, pascal: str, camel: str) -> None:
        identity = ProjectIdentity(name)
        assert identity.slug == slug
        assert identity.snake == snake
        assert identity.pascal == pascal
        assert identity.camel == camel

    def test_leading_digit(self) -> None:
        identity = ProjectIdentity("2fast")
        assert identity.snake == "_2fast"
        assert identity.pascal == "App2fast"


class TestFileNode:
    def test_root_level_parent(self) -> None:
        assert FileNode("package.json", "{}").parent is None

    def test_nested_parent(self) -> None:
        assert FileNode("src/store/index.ts", "").parent == "src/store"


class TestBuildOutcome:
    def test_defaults(self) -> None:
        outcome = BuildOutcome(success=True, message="ok")
        assert outcome.produced_paths == []
        assert outcome.warnings == []
        assert outcome.failure is None

    def test_frozen(self) -> None:
        outcome = BuildOutcome(success=True, message="ok")
        with pytest.raises(ValidationError):
            outcome.success = False  # type: ignore[misc]
