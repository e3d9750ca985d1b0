"""FrameworkRegistry: identifier lookup over registered builders.

INVARIANT: An identifier is claimed by at most one builder. Collisions are
raised at registration time so dispatch is never ambiguous afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from scaffoldctl.domain.composer import FamilySpec
from scaffoldctl.frameworks.builder import FrameworkBuilder

logger = logging.getLogger(__name__)


class UnknownFrameworkError(LookupError):
    """Raised by :meth:`FrameworkRegistry.require` for an unclaimed identifier."""

    def __init__(self, identifier: str, supported: list[str]) -> None:
        self.identifier = identifier
        self.supported = supported
        super().__init__(
            f"Unsupported framework: {identifier}. Supported frameworks: {', '.join(supported)}"
        )


def _normalize(identifier: str) -> str:
    return identifier.strip().lower()


class FrameworkRegistry:
    """Ordered collection of builders keyed by case-insensitive identifier."""

    def __init__(self) -> None:
        self._builders: list[FrameworkBuilder] = []
        self._index: dict[str, FrameworkBuilder] = {}

    def __len__(self) -> int:
        return len(self._builders)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and _normalize(identifier) in self._index

    def register(self, builder: FrameworkBuilder) -> None:
        """Add *builder*; raise ValueError if any identifier is already claimed."""
        claimed = [_normalize(i) for i in builder.identifiers]
        if len(claimed) != len(set(claimed)):
            msg = f"Builder {builder.name!r} claims an identifier twice"
            raise ValueError(msg)
        for key in claimed:
            owner = self._index.get(key)
            if owner is not None:
                msg = f"Identifier {key!r} of {builder.name!r} is already claimed by {owner.name!r}"
                raise ValueError(msg)

        self._builders.append(builder)
        for key in claimed:
            self._index[key] = builder
        logger.debug("Registered framework %s (%s)", builder.name, ", ".join(claimed))

    def resolve(self, identifier: str) -> FrameworkBuilder | None:
        """Exact, case-insensitive match; no prefix or fuzzy matching."""
        return self._index.get(_normalize(identifier))

    def require(self, identifier: str) -> FrameworkBuilder:
        builder = self.resolve(identifier)
        if builder is None:
            raise UnknownFrameworkError(identifier, self.list_identifiers())
        return builder

    def list_identifiers(self) -> list[str]:
        """Registration order, then alias order within each builder."""
        return [alias for builder in self._builders for alias in builder.identifiers]

    def grouped(self) -> dict[str, list[str]]:
        """Identifiers grouped by family category, in first-seen order."""
        groups: dict[str, list[str]] = {}
        for builder in self._builders:
            groups.setdefault(str(builder.family.category), []).extend(builder.identifiers)
        return groups

    def builders(self) -> list[FrameworkBuilder]:
        return list(self._builders)


def default_registry(
    extra_families: Iterable[FamilySpec] = (),
    *,
    template_dir: Path | None = None,
) -> FrameworkRegistry:
    """Build a fresh registry holding the built-in families.

    *extra_families* (typically plugin-provided) are registered after the
    built-ins; one that collides with an existing identifier is skipped
    with a warning instead of aborting startup.
    """
    from scaffoldctl.frameworks.families import BUILTIN_FAMILIES

    registry = FrameworkRegistry()
    for family in BUILTIN_FAMILIES:
        registry.register(FrameworkBuilder(family, template_dir=template_dir))

    for family in extra_families:
        try:
            registry.register(FrameworkBuilder(family, template_dir=template_dir))
        except ValueError as exc:
            logger.warning("Skipping plugin framework %s: %s", family.name, exc)
    return registry
