"""FrameworkBuilder binds one FamilySpec to the build pipeline.

Pipeline: project root, root directory, options, file nodes, writes.
Every step runs inside one failure boundary; an error becomes a failed
:class:`BuildOutcome`, never an exception. No rollback is attempted, so a
failed build may leave a partial tree behind.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scaffoldctl.domain.composer import FamilySpec, compose
from scaffoldctl.domain.options import ResolvedOptions, resolve_options
from scaffoldctl.domain.project import BuildOutcome, FileNode, ProjectIdentity
from scaffoldctl.infrastructure.templates import build_template_environment
from scaffoldctl.services.telemetry import trace_span

if TYPE_CHECKING:
    from jinja2 import Environment

    from scaffoldctl.domain.project import ProjectRequest
    from scaffoldctl.infrastructure.filesystem import Filesystem

logger = logging.getLogger(__name__)


class FrameworkBuilder:
    """Build contract for one framework family.

    The template environment is built with the builder and shared,
    read-only, by every build of this family.
    """

    def __init__(self, family: FamilySpec, *, template_dir: Path | None = None) -> None:
        self.family = family
        self._env: Environment = build_template_environment(
            family.group,
            package=family.template_package,
            override_root=template_dir,
        )

    def __repr__(self) -> str:
        return f"FrameworkBuilder({self.family.name!r})"

    @property
    def name(self) -> str:
        return self.family.name

    @property
    def label(self) -> str:
        return self.family.label

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Claimed aliases, canonical first."""
        return self.family.aliases

    @property
    def env(self) -> Environment:
        return self._env

    def resolve(
        self,
        declared: Mapping[str, Any] | None,
        identifier: str | None = None,
    ) -> ResolvedOptions:
        """Resolve *declared* options under the presets of *identifier*."""
        presets = self.family.presets_for(identifier) if identifier else None
        return resolve_options(declared, self.family.options, presets=presets)

    def compose(self, resolved: ResolvedOptions, identity: ProjectIdentity) -> tuple[FileNode, ...]:
        return compose(self.family, resolved, identity, env=self.env)

    def build(
        self,
        request: ProjectRequest,
        filesystem: Filesystem,
        *,
        base_dir: Path,
    ) -> BuildOutcome:
        """Create the project tree for *request*.

        Args:
            request: Validated request; ``target_root`` wins over *base_dir*.
            filesystem: Capability used for every directory and file write.
            base_dir: Parent directory when the request names none.
        """
        project_root: Path | None = None
        try:
            project_root = filesystem.resolve(request.target_root or base_dir, request.name)
            filesystem.make_dirs(project_root)

            with trace_span("resolve") as span:
                resolved = self.resolve(request.declared_options, request.family_id)
                if span is not None:
                    span.annotate("mismatches", len(resolved.mismatches))

            with trace_span("compose") as span:
                nodes = self.compose(resolved, ProjectIdentity(request.name))
                if span is not None:
                    span.annotate("files", len(nodes))

            with trace_span("write"):
                written = self._write(nodes, project_root, filesystem)
        except Exception as exc:
            logger.exception("Failed to build %s project %r", self.label, request.name)
            return BuildOutcome(
                success=False,
                message=f"Failed to create {self.label} project",
                project_root=str(project_root) if project_root is not None else None,
                failure=str(exc) or exc.__class__.__name__,
            )

        logger.debug("Wrote %d files under %s", len(written), project_root)
        return BuildOutcome(
            success=True,
            message=f"{self.label} project '{request.name}' created successfully",
            project_root=str(project_root),
            produced_paths=written,
            warnings=[
                f"Option {key!r} had an invalid value; default used" for key in resolved.mismatches
            ],
        )

    @staticmethod
    def _write(nodes: tuple[FileNode, ...], root: Path, filesystem: Filesystem) -> list[str]:
        written: list[str] = []
        for node in nodes:
            if node.parent is not None:
                filesystem.make_dirs(root / node.parent)
            filesystem.write_text(root / node.path, node.content)
            written.append(node.path)
        return written
