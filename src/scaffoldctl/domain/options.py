"""Option schemas and the table-driven option resolver.

Each family declares a tuple of :class:`OptionSpec` rows. Resolution walks
the table once: alias preset, then the declared value if it passes the
row's type and choice check, then the row default.

INVARIANT: A declared value that fails its check is treated as absent.
Mismatches are logged and recorded, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionSpec:
    """One recognized option: wire key, default, accepted type, allowed values."""

    key: str
    default: Any
    kind: type | tuple[type, ...]
    choices: tuple[Any, ...] | None = None
    description: str = ""

    def accepts(self, value: Any) -> bool:
        """Return True if *value* is well-typed for this option."""
        kinds = self.kind if isinstance(self.kind, tuple) else (self.kind,)
        # bool is an int subclass; never let one stand in for the other.
        if isinstance(value, bool) and bool not in kinds:
            return False
        if not isinstance(value, kinds):
            return False
        return self.choices is None or value in self.choices

    def describe(self) -> dict[str, Any]:
        """Serializable view used by discovery tools."""
        kinds = self.kind if isinstance(self.kind, tuple) else (self.kind,)
        info: dict[str, Any] = {
            "key": self.key,
            "type": "|".join(k.__name__ for k in kinds),
            "default": self.default,
        }
        if self.choices is not None:
            info["choices"] = list(self.choices)
        if self.description:
            info["description"] = self.description
        return info


def with_defaults(
    schema: tuple[OptionSpec, ...],
    **overrides: Any,
) -> tuple[OptionSpec, ...]:
    """Copy *schema* with some defaults replaced, keeping row order."""
    unknown = set(overrides) - {spec.key for spec in schema}
    if unknown:
        msg = f"Unknown option keys: {sorted(unknown)}"
        raise ValueError(msg)
    return tuple(
        OptionSpec(s.key, overrides[s.key], s.kind, s.choices, s.description)
        if s.key in overrides
        else s
        for s in schema
    )


def with_choices(
    schema: tuple[OptionSpec, ...],
    key: str,
    choices: tuple[Any, ...],
) -> tuple[OptionSpec, ...]:
    """Copy *schema* restricting *key* to *choices*."""
    if key not in {spec.key for spec in schema}:
        msg = f"Unknown option key: {key!r}"
        raise ValueError(msg)
    return tuple(
        OptionSpec(s.key, s.default, s.kind, choices, s.description) if s.key == key else s
        for s in schema
    )


@dataclass(frozen=True)
class ResolvedOptions(Mapping[str, Any]):
    """Fully-defaulted option values for one build.

    Behaves as a read-only mapping of recognized keys, so templates can
    write ``opts.tailwind`` or ``opts["tailwind"]``.

    Attributes:
        data: Every schema key with a concrete value.
        extras: Declared keys the schema does not recognize (inert).
        mismatches: Keys whose declared value was rejected.
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    extras: Mapping[str, Any] = field(default_factory=dict)
    mismatches: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __hash__(self) -> int:
        return hash((tuple(self.data.items()), self.mismatches))

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)


def resolve_options(
    declared: Mapping[str, Any] | None,
    schema: tuple[OptionSpec, ...],
    *,
    presets: Mapping[str, Any] | None = None,
) -> ResolvedOptions:
    """Merge *declared* options over the *schema* defaults.

    *presets* are values implied by the framework alias (``vite-ts`` implies
    TypeScript); they outrank declared values.
    """
    declared = declared or {}
    presets = presets or {}
    values: dict[str, Any] = {}
    mismatches: list[str] = []

    for spec in schema:
        if spec.key in presets:
            values[spec.key] = presets[spec.key]
        elif spec.key in declared and spec.accepts(declared[spec.key]):
            values[spec.key] = declared[spec.key]
        else:
            if spec.key in declared:
                logger.warning(
                    "Option %r rejected value %r; using default %r",
                    spec.key,
                    declared[spec.key],
                    spec.default,
                )
                mismatches.append(spec.key)
            values[spec.key] = spec.default

    known = {spec.key for spec in schema}
    extras = {k: v for k, v in declared.items() if k not in known}
    if extras:
        logger.debug("Ignoring unrecognized options: %s", sorted(extras))

    return ResolvedOptions(data=values, extras=extras, mismatches=tuple(mismatches))
