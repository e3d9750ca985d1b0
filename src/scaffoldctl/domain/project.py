"""Request, identity, file node, and outcome models for one scaffold run.

A :class:`ProjectRequest` is validated at the boundary and is immutable.
A build produces exactly one :class:`BuildOutcome`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, Field, field_validator

NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class ProjectRequest(BaseModel):
    """Validated input for one build.

    Attributes:
        name: Project directory name; a single path segment.
        family_id: Framework identifier, matched case-insensitively.
        declared_options: Caller options; unknown keys are tolerated.
        target_root: Absolute directory the project is created in.
    """

    model_config = {"frozen": True}

    name: str
    family_id: str
    declared_options: dict[str, Any] = Field(default_factory=dict)
    target_root: Path | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "Project name must not be empty"
            raise ValueError(msg)
        if not NAME_PATTERN.match(value):
            msg = (
                f"Invalid project name {value!r}: use letters, digits, '.', '_' or '-', "
                "starting with a letter or digit"
            )
            raise ValueError(msg)
        return value

    @field_validator("family_id")
    @classmethod
    def _check_family(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "Framework must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("target_root")
    @classmethod
    def _check_root(cls, value: Path | None) -> Path | None:
        if value is not None and not value.is_absolute():
            msg = f"Output path must be absolute: {value}"
            raise ValueError(msg)
        return value


def _words(value: str) -> list[str]:
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", value)
    return [w for w in re.split(r"[^A-Za-z0-9]+", spaced) if w]


@dataclass(frozen=True)
class ProjectIdentity:
    """Naming forms of a project name used inside generated files."""

    name: str

    @property
    def slug(self) -> str:
        """``My App`` -> ``my-app`` (package.json / artifact names)."""
        return "-".join(w.lower() for w in _words(self.name)) or "app"

    @property
    def snake(self) -> str:
        """``my-app`` -> ``my_app`` (Python packages)."""
        snake = "_".join(w.lower() for w in _words(self.name)) or "app"
        return f"_{snake}" if snake[0].isdigit() else snake

    @property
    def pascal(self) -> str:
        """``my-app`` -> ``MyApp`` (class names)."""
        pascal = "".join(w[:1].upper() + w[1:] for w in _words(self.name)) or "App"
        return f"App{pascal}" if pascal[0].isdigit() else pascal

    @property
    def camel(self) -> str:
        pascal = self.pascal
        return pascal[:1].lower() + pascal[1:]


@dataclass(frozen=True)
class FileNode:
    """One generated file, relative to the project root."""

    path: str
    content: str

    @property
    def parent(self) -> str | None:
        """Relative parent directory, or None for root-level files."""
        parent = PurePosixPath(self.path).parent
        return None if str(parent) == "." else parent.as_posix()


class BuildOutcome(BaseModel):
    """Terminal result of one build.

    Attributes:
        success: Whether every file was written.
        message: Human-readable summary naming the project.
        project_root: Absolute project directory (None if never resolved).
        produced_paths: Relative paths written, in composition order.
        failure: Underlying error text when ``success`` is False.
        warnings: Non-fatal issues such as rejected option values.
    """

    model_config = {"frozen": True}

    success: bool
    message: str
    project_root: str | None = None
    produced_paths: list[str] = Field(default_factory=list)
    failure: str | None = None
    warnings: list[str] = Field(default_factory=list)
