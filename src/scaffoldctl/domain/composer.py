"""Data-driven template composer.

A framework family is a :class:`FamilySpec` table: option rows, alias
presets, dependency contributions, and file contributions. :func:`compose`
is the only engine; families never carry imperative composition code.

INVARIANT: compose() is pure. Identical (family, options, identity) inputs
yield the same FileNodes in the same order, byte for byte.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from jinja2 import Environment

from scaffoldctl.domain.options import OptionSpec, ResolvedOptions
from scaffoldctl.domain.project import FileNode, ProjectIdentity

Predicate = Callable[[Mapping[str, Any]], bool]
ContextHook = Callable[[ResolvedOptions, ProjectIdentity], Mapping[str, Any]]

# ---------------------------------------------------------------------------
# Predicate combinators
# ---------------------------------------------------------------------------


def always(opts: Mapping[str, Any]) -> bool:
    return True


def enabled(key: str) -> Predicate:
    """True when option *key* is truthy."""
    return lambda opts: bool(opts.get(key))


def disabled(key: str) -> Predicate:
    return lambda opts: not opts.get(key)


def equals(key: str, value: Any) -> Predicate:
    return lambda opts: opts.get(key) == value


def one_of(key: str, *values: Any) -> Predicate:
    return lambda opts: opts.get(key) in values


def all_of(*predicates: Predicate) -> Predicate:
    return lambda opts: all(p(opts) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda opts: any(p(opts) for p in predicates)


# ---------------------------------------------------------------------------
# Table rows
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileContribution:
    """One generated file, gated by *when*.

    ``path`` is rendered as a template (``src/main.{{ ext.script }}``).
    ``template`` names a file in the family's template group; None writes
    an empty file.
    """

    path: str
    template: str | None = None
    when: Predicate = always


@dataclass(frozen=True)
class DependencyContribution:
    """Manifest entries merged into *group* when *when* holds.

    For dependency groups ``entries`` maps package name to a pinned
    version; for ``scripts`` it maps script name to command.
    """

    group: str
    entries: Mapping[str, str]
    when: Predicate = always


@dataclass(frozen=True)
class FamilySpec:
    """Declarative description of one framework family.

    Attributes:
        name: Canonical family name (also the template group).
        label: Display name used in messages (``"React"``).
        category: Discovery group label.
        aliases: Claimed identifiers, canonical first.
        options: Option schema rows.
        presets: Alias -> option values forced by that alias.
        dependencies: Dependency contributions, in manifest order.
        files: File contributions, in output order.
        context: Optional hook deriving extra template values.
        typed_default: Extension choice when the schema has no
            ``typescript`` row (NestJS is always typed).
        template_group: Template directory; defaults to ``name``.
        template_package: Package that ships ``templates/<group>``.
    """

    name: str
    label: str
    category: str
    aliases: tuple[str, ...]
    options: tuple[OptionSpec, ...]
    files: tuple[FileContribution, ...]
    presets: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    dependencies: tuple[DependencyContribution, ...] = ()
    context: ContextHook | None = None
    typed_default: bool = False
    template_group: str | None = None
    template_package: str = "scaffoldctl"

    def __post_init__(self) -> None:
        if not self.aliases:
            msg = f"Family {self.name!r} declares no aliases"
            raise ValueError(msg)
        keys = [spec.key for spec in self.options]
        if len(keys) != len(set(keys)):
            msg = f"Family {self.name!r} declares an option key twice"
            raise ValueError(msg)
        stray = set(self.presets) - set(self.aliases)
        if stray:
            msg = f"Family {self.name!r} has presets for unclaimed aliases: {sorted(stray)}"
            raise ValueError(msg)

    @property
    def group(self) -> str:
        return self.template_group or self.name

    def presets_for(self, identifier: str) -> Mapping[str, Any]:
        """Option values forced by *identifier* (case-insensitive)."""
        return self.presets.get(identifier.strip().lower(), {})


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def collect_dependencies(
    family: FamilySpec,
    opts: Mapping[str, Any],
) -> dict[str, dict[str, str]]:
    """Merge manifest contributions whose predicate holds, in table order.

    Later rows override earlier ones for the same key, so a variant can
    replace a base script.
    """
    groups: dict[str, dict[str, str]] = {}
    for contribution in family.dependencies:
        if contribution.when(opts):
            groups.setdefault(contribution.group, {}).update(contribution.entries)
    return groups


def build_context(
    family: FamilySpec,
    resolved: ResolvedOptions,
    identity: ProjectIdentity,
) -> dict[str, Any]:
    """Template context shared by every file of one compose call."""
    typed = bool(resolved.get("typescript", family.typed_default))
    context: dict[str, Any] = {
        "project": identity,
        "opts": resolved,
        "ext": {"script": "ts" if typed else "js", "component": "tsx" if typed else "jsx"},
        "typed": typed,
        "deps": collect_dependencies(family, resolved),
        "framework": family.label,
    }
    if family.context is not None:
        context.update(family.context(resolved, identity))
    return context


def compose(
    family: FamilySpec,
    resolved: ResolvedOptions,
    identity: ProjectIdentity,
    *,
    env: Environment,
) -> tuple[FileNode, ...]:
    """Render every contribution whose predicate holds.

    Raises:
        ValueError: If two contributions render to the same path.
    """
    context = build_context(family, resolved, identity)
    nodes: list[FileNode] = []
    seen: set[str] = set()

    for contribution in family.files:
        if not contribution.when(resolved):
            continue
        path = env.from_string(contribution.path).render(context)
        if path in seen:
            msg = f"Family {family.name!r} produces {path!r} twice"
            raise ValueError(msg)
        seen.add(path)
        if contribution.template is None:
            content = ""
        else:
            content = env.get_template(contribution.template).render(context)
        nodes.append(FileNode(path=path, content=content))

    return tuple(nodes)
