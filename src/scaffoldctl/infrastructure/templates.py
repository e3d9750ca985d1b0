"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

import json
import re
from importlib import resources
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

SHARED_GROUP = "shared"


def _words(value: str) -> list[str]:
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", str(value))
    return [w for w in re.split(r"[^A-Za-z0-9]+", spaced) if w]


def slugify(value: str) -> str:
    return "-".join(w.lower() for w in _words(value))


def snake_case(value: str) -> str:
    return "_".join(w.lower() for w in _words(value))


def pascal_case(value: str) -> str:
    return "".join(w[:1].upper() + w[1:] for w in _words(value))


def camel_case(value: str) -> str:
    pascal = pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def json_block(value: Any, indent: int = 2, level: int = 0) -> str:
    """Serialize *value* as pretty JSON for embedding in a manifest.

    Continuation lines are shifted by *level* spaces so the block lines up
    with the key it is rendered under. Unlike ``tojson`` nothing is
    HTML-escaped, so version ranges like ``>=1.0`` survive.
    """
    text = json.dumps(value, indent=indent, ensure_ascii=False)
    if level:
        text = text.replace("\n", "\n" + " " * level)
    return text


def build_template_environment(
    group: str,
    *,
    package: str = "scaffoldctl",
    override_root: Path | None = None,
) -> Environment:
    """Build a Jinja2 environment for one family template group.

    Lookup order: user overrides (``override_root/<group>`` then
    ``override_root``), the packaged group, then the packaged ``shared``
    group that holds files common to every family (``.gitignore``
    fragments, Docker ignore lists). Plugin families pass their own
    *package* so their templates ship with the plugin.
    """

    loaders: list[BaseLoader] = []
    if override_root is not None:
        loaders.append(FileSystemLoader([str(override_root / group), str(override_root)]))

    # A plugin family may ship no templates of its own and rely on shared ones.
    if resources.files(package).joinpath("templates", group).is_dir():
        loaders.append(PackageLoader(package, f"templates/{group}"))
    if group != SHARED_GROUP:
        loaders.append(PackageLoader("scaffoldctl", f"templates/{SHARED_GROUP}"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(
        slugify=slugify,
        snake_case=snake_case,
        pascal_case=pascal_case,
        camel_case=camel_case,
        json_block=json_block,
    )
    return env
