"""Pluggy hook specifications for scaffoldctl setup extensions and build events.

One setup-time hook lets plugins contribute framework families. One
lifecycle hook fires after every successful build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from scaffoldctl.domain.composer import FamilySpec

hookspec = pluggy.HookspecMarker("scaffoldctl")
hookimpl = pluggy.HookimplMarker("scaffoldctl")


class ScaffoldctlHookSpec:
    """Hook specifications for the scaffoldctl plugin system."""

    @hookspec
    def register_frameworks(self) -> list[FamilySpec] | None:
        """Return extra framework families, registered after the built-ins."""

    @hookspec
    def post_build(
        self,
        framework: str,
        project_root: str,
        files: list[str],
    ) -> None:
        """Called after a project tree was written successfully."""
