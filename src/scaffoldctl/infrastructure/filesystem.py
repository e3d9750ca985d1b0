"""Filesystem capability used by builders.

Builders never touch ``pathlib`` write APIs directly; they go through a
:class:`Filesystem` so tests can inject failures and recorders.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Filesystem(Protocol):
    """The three primitives a build needs."""

    def make_dirs(self, path: Path) -> None:
        """Create *path* and missing parents; existing directories are fine."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite *path* with *content* (UTF-8)."""
        ...

    def resolve(self, base: Path, *parts: str) -> Path:
        """Join *parts* onto *base* and return an absolute path."""
        ...


class LocalFilesystem:
    """Filesystem backed by the local disk."""

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def resolve(self, base: Path, *parts: str) -> Path:
        root = base.joinpath(*parts).resolve()
        # Guard against a relative part climbing out of the base.
        if parts and not root.is_relative_to(base.resolve()):
            msg = f"Path escapes base directory: {root}"
            raise ValueError(msg)
        return root
