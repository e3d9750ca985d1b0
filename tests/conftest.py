"""Shared pytest fixtures for scaffoldctl tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from scaffoldctl.config.settings import ScaffoldSettings
from scaffoldctl.frameworks.registry import FrameworkRegistry, default_registry
from scaffoldctl.infrastructure.workspace import Workspace
from scaffoldctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SCAFFOLDCTL_* variables from the developer shell out of tests."""
    for key in list(os.environ):
        if key.startswith("SCAFFOLDCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """`-v` enables telemetry for the rest of the thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ScaffoldSettings:
    """Settings anchored at a temp directory with no config file."""
    return ScaffoldSettings.from_cli(base_dir=tmp_path)


@pytest.fixture
def workspace(settings: ScaffoldSettings) -> Workspace:
    """Workspace with built-in frameworks only (plugins not loaded)."""
    return Workspace(settings)


@pytest.fixture
def registry() -> FrameworkRegistry:
    """A fresh registry holding the built-in families."""
    return default_registry()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from a temp directory; default builds land in CWD."""
    monkeypatch.chdir(tmp_path)
