"""Option schemas and file contributions shared across families."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scaffoldctl.domain.composer import (
    ContextHook,
    DependencyContribution,
    FileContribution,
    all_of,
    enabled,
    equals,
    one_of,
)
from scaffoldctl.domain.options import OptionSpec, ResolvedOptions
from scaffoldctl.domain.project import ProjectIdentity
from scaffoldctl.domain.types import StateManagement

# ---------------------------------------------------------------------------
# Option schemas
# ---------------------------------------------------------------------------

FRONTEND_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("typescript", True, bool, description="Generate TypeScript sources"),
    OptionSpec("tailwind", False, bool, description="Add Tailwind CSS"),
    OptionSpec(
        "stateManagement",
        StateManagement.NONE.value,
        str,
        (StateManagement.NONE.value,),
        description="Client state library",
    ),
    OptionSpec("router", False, bool, description="Add client-side routing and views"),
    OptionSpec("testing", False, bool, description="Add unit test scaffolding"),
    OptionSpec("eslint", False, bool, description="Add an ESLint config"),
    OptionSpec("prettier", False, bool, description="Add a Prettier config"),
    OptionSpec("docker", False, bool, description="Add Dockerfile and docker-compose.yml"),
)

NODE_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("typescript", True, bool, description="Generate TypeScript sources"),
    OptionSpec("docker", True, bool, description="Add Dockerfile and docker-compose.yml"),
    OptionSpec("tests", True, bool, description="Add a test suite"),
    OptionSpec(
        "database",
        "none",
        str,
        ("none", "postgresql", "mysql", "mongodb"),
        description="Database client to wire in",
    ),
)

PYTHON_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("pythonVersion", "3.11", str, description="Python version for images and metadata"),
    OptionSpec("docker", True, bool, description="Add Dockerfile and docker-compose.yml"),
    OptionSpec("tests", True, bool, description="Add a pytest suite"),
    OptionSpec(
        "database",
        "none",
        str,
        ("none", "postgresql", "mysql", "sqlite"),
        description="Database driver to wire in",
    ),
)

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

typed = enabled("typescript")
has_database = one_of("database", "postgresql", "mysql", "sqlite", "mongodb")
with_zustand = equals("stateManagement", StateManagement.ZUSTAND.value)
with_redux = equals("stateManagement", StateManagement.REDUX.value)
with_pinia = equals("stateManagement", StateManagement.PINIA.value)


def static_context(**values: Any) -> ContextHook:
    """Context hook contributing fixed template values."""

    def hook(resolved: ResolvedOptions, identity: ProjectIdentity) -> Mapping[str, Any]:
        return values

    return hook


# ---------------------------------------------------------------------------
# File contributions
# ---------------------------------------------------------------------------

README = FileContribution("README.md", "README.md.j2")

NODE_GITIGNORE = FileContribution(".gitignore", "gitignore-node.j2")
PYTHON_GITIGNORE = FileContribution(".gitignore", "gitignore-python.j2")

TAILWIND_FILES = (
    FileContribution("tailwind.config.{{ ext.script }}", "tailwind.config.j2", enabled("tailwind")),
    FileContribution("postcss.config.js", "postcss.config.js.j2", enabled("tailwind")),
)

PRETTIER_FILE = FileContribution(".prettierrc", "prettierrc.j2", enabled("prettier"))

NODE_DOCKER_FILES = (
    FileContribution("Dockerfile", "Dockerfile.node.j2", enabled("docker")),
    FileContribution("docker-compose.yml", "docker-compose.yml.j2", enabled("docker")),
    FileContribution(".dockerignore", "dockerignore-node.j2", enabled("docker")),
)

PYTHON_DOCKER_FILES = (
    FileContribution("Dockerfile", "Dockerfile.j2", enabled("docker")),
    FileContribution("docker-compose.yml", "docker-compose.yml.j2", enabled("docker")),
    FileContribution(".dockerignore", "dockerignore-python.j2", enabled("docker")),
)

ENV_EXAMPLE = FileContribution(".env.example", "env.example.j2")

# ---------------------------------------------------------------------------
# Dependency contributions
# ---------------------------------------------------------------------------

TAILWIND_DEPS = DependencyContribution(
    "devDependencies",
    {"tailwindcss": "^3.3.6", "postcss": "^8.4.32", "autoprefixer": "^10.4.16"},
    enabled("tailwind"),
)

PRETTIER_DEPS = DependencyContribution(
    "devDependencies", {"prettier": "^3.1.1"}, enabled("prettier")
)

NODE_DATABASE_DEPS = (
    DependencyContribution("dependencies", {"pg": "^8.11.3"}, equals("database", "postgresql")),
    DependencyContribution("dependencies", {"mysql2": "^3.6.5"}, equals("database", "mysql")),
    DependencyContribution("dependencies", {"mongoose": "^8.0.3"}, equals("database", "mongodb")),
    DependencyContribution(
        "devDependencies",
        {"@types/pg": "^8.10.9"},
        all_of(equals("database", "postgresql"), typed),
    ),
)

PYTHON_DATABASE_DEPS = (
    DependencyContribution(
        "requirements", {"psycopg2-binary": ">=2.9.9"}, equals("database", "postgresql")
    ),
    DependencyContribution("requirements", {"PyMySQL": ">=1.1.0"}, equals("database", "mysql")),
)
