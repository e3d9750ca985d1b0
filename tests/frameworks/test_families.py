"""Tests for the built-in framework families.

Every family is composed across an option grid (defaults, each boolean
flipped, each choice value) and the generated manifests and sources are
checked for syntactic validity.
"""

from __future__ import annotations

import json
import tomllib
from typing import Any

import pytest

from scaffoldctl.domain.composer import FamilySpec
from scaffoldctl.domain.project import ProjectIdentity
from scaffoldctl.frameworks.builder import FrameworkBuilder
from scaffoldctl.frameworks.families import BUILTIN_FAMILIES

_BUILDERS = {family.name: FrameworkBuilder(family) for family in BUILTIN_FAMILIES}
_IDENTITY = ProjectIdentity("demo-app")


def _variants(family: FamilySpec) -> list[dict[str, Any]]:
    variants: list[dict[str, Any]] = [{}]
    for spec in family.options:
        if spec.choices is not None:
            variants.extend({spec.key: choice} for choice in spec.choices)
        elif spec.kind is bool:
            variants.append({spec.key: not spec.default})
    variants.append({spec.key: True for spec in family.options if spec.kind is bool})
    return variants


_GRID = [
    pytest.param(family.name, variant, id=f"{family.name}-{i}")
    for family in BUILTIN_FAMILIES
    for i, variant in enumerate(_variants(family))
]

_ALIASES = [
    pytest.param(family.name, alias, id=alias)
    for family in BUILTIN_FAMILIES
    for alias in family.aliases
]


def _compose(
    name: str,
    declared: dict[str, Any] | None = None,
    identifier: str | None = None,
) -> dict[str, str]:
    builder = _BUILDERS[name]
    nodes = builder.compose(builder.resolve(declared, identifier), _IDENTITY)
    return {node.path: node.content for node in nodes}


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


class TestOptionGrid:
    @pytest.mark.parametrize(("name", "declared"), _GRID)
    def test_composes_valid_tree(self, name: str, declared: dict[str, Any]) -> None:
        files = _compose(name, declared)

        assert "README.md" in files
        assert ".gitignore" in files
        for path in files:
            assert not path.startswith("/")
            assert ".." not in path.split("/")

    @pytest.mark.parametrize(("name", "declared"), _GRID)
    def test_json_files_parse(self, name: str, declared: dict[str, Any]) -> None:
        files = _compose(name, declared)
        for path, content in files.items():
            if path.endswith(".json") or path.endswith(".prettierrc"):
                json.loads(content)

    @pytest.mark.parametrize(("name", "declared"), _GRID)
    def test_python_sources_compile(self, name: str, declared: dict[str, Any]) -> None:
        files = _compose(name, declared)
        for path, content in files.items():
            if path.endswith(".py"):
                compile(content, path, "exec")
            elif path.endswith(".toml"):
                tomllib.loads(content)

    @pytest.mark.parametrize(("name", "alias"), _ALIASES)
    def test_every_alias_composes(self, name: str, alias: str) -> None:
        assert "README.md" in _compose(name, identifier=alias)


class TestTemplates:
    @pytest.mark.parametrize("family", BUILTIN_FAMILIES, ids=lambda f: f.name)
    def test_every_template_resolves(self, family: FamilySpec) -> None:
        env = _BUILDERS[family.name].env
        for contribution in family.files:
            if contribution.template is not None:
                env.get_template(contribution.template)

    @pytest.mark.parametrize("family", BUILTIN_FAMILIES, ids=lambda f: f.name)
    def test_compose_is_deterministic(self, family: FamilySpec) -> None:
        assert _compose(family.name) == _compose(family.name)


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_FRONTEND_DEFAULTS: dict[str, Any] = {
    "typescript": True,
    "tailwind": False,
    "stateManagement": "none",
    "router": False,
    "testing": False,
    "eslint": False,
    "prettier": False,
    "docker": False,
}
_LINTED = {**_FRONTEND_DEFAULTS, "eslint": True, "prettier": True}
_NODE_DEFAULTS: dict[str, Any] = {
    "typescript": True,
    "docker": True,
    "tests": True,
    "database": "none",
}
_PYTHON_DEFAULTS: dict[str, Any] = {
    "pythonVersion": "3.11",
    "docker": True,
    "tests": True,
    "database": "none",
}

DOCUMENTED_DEFAULTS: dict[str, dict[str, Any]] = {
    "spring-boot": {
        "javaVersion": "17",
        "springBootVersion": "3.2.0",
        "groupId": "com.example",
        "artifactId": "",
        "docker": False,
        "tests": True,
        "database": "h2",
        "webStack": "mvc",
    },
    "react": {**_FRONTEND_DEFAULTS, "bundler": "vite"},
    "vue": _LINTED,
    "fastapi": {**_PYTHON_DEFAULTS, "server": "uvicorn"},
    "django": {**_PYTHON_DEFAULTS, "rest": False, "cms": False},
    "flask": {**_PYTHON_DEFAULTS, "extension": "none"},
    "vite": {
        key: _FRONTEND_DEFAULTS[key]
        for key in ("typescript", "tailwind", "testing", "eslint", "prettier", "docker")
    },
    "express": {**_NODE_DEFAULTS, "rest": False},
    "fastify": {**_NODE_DEFAULTS, "rest": False},
    "nestjs": {"docker": True, "tests": True, "database": "none", "graphql": False},
    "next": {**_LINTED, "router": True, "appRouter": True},
    "nuxt": _LINTED,
}


class TestDocumentedDefaults:
    def test_every_family_listed(self) -> None:
        assert set(DOCUMENTED_DEFAULTS) == {family.name for family in BUILTIN_FAMILIES}

    @pytest.mark.parametrize("name", list(DOCUMENTED_DEFAULTS))
    def test_omitted_options_take_defaults(self, name: str) -> None:
        resolved = _BUILDERS[name].resolve({})
        assert resolved.to_dict() == DOCUMENTED_DEFAULTS[name]
        assert resolved.mismatches == ()

    @pytest.mark.parametrize("name", list(DOCUMENTED_DEFAULTS))
    def test_canonical_alias_adds_nothing(self, name: str) -> None:
        builder = _BUILDERS[name]
        assert builder.resolve(None, name).to_dict() == DOCUMENTED_DEFAULTS[name]


# ---------------------------------------------------------------------------
# Family specifics
# ---------------------------------------------------------------------------


class TestFrontend:
    def test_vite_ts_preset_forces_typescript(self) -> None:
        files = _compose("vite", {"typescript": False}, "vite-ts")
        assert "src/main.ts" in files
        assert "src/main.js" not in files

    def test_vite_javascript(self) -> None:
        files = _compose("vite", {"typescript": False})
        assert "src/main.js" in files
        assert "tsconfig.json" not in files

    def test_react_cra_preset(self) -> None:
        files = _compose("react", None, "react-cra")
        assert "public/index.html" in files
        assert "src/index.tsx" in files
        assert "vite.config.ts" not in files
        assert "browserslist" in json.loads(files["package.json"])

    def test_react_prettier_without_tailwind_plugin(self) -> None:
        files = _compose("react", {"prettier": True, "tailwind": True})
        assert "plugins" not in json.loads(files[".prettierrc"])

    def test_next_pages_router(self) -> None:
        files = _compose("next", None, "next-pages")
        assert "pages/index.tsx" in files
        assert "pages/_app.tsx" in files
        assert not any(path.startswith("app/") for path in files)

    def test_next_app_router_default(self) -> None:
        files = _compose("next")
        assert "app/page.tsx" in files
        assert "app/about/page.tsx" in files
        assert not any(path.startswith("pages/") for path in files)

    def test_next_prettier_tailwind_plugin(self) -> None:
        files = _compose("next", {"tailwind": True})
        manifest = json.loads(files["package.json"])
        assert "prettier-plugin-tailwindcss" in manifest["devDependencies"]
        assert "eslint-config-prettier" in manifest["devDependencies"]
        assert json.loads(files[".prettierrc"])["plugins"] == ["prettier-plugin-tailwindcss"]

    def test_next_eslint_extends_prettier(self) -> None:
        files = _compose("next")
        assert json.loads(files[".eslintrc.json"])["extends"] == [
            "next/core-web-vitals",
            "prettier",
        ]

    def test_package_name_is_slug(self) -> None:
        files = _compose("vue")
        assert json.loads(files["package.json"])["name"] == "demo-app"


class TestNode:
    def test_express_javascript(self) -> None:
        files = _compose("express", {"typescript": False})
        assert "src/index.js" in files
        assert "tsconfig.json" not in files
        assert json.loads(files["package.json"])["main"] == "src/index.js"

    def test_express_ts_preset(self) -> None:
        files = _compose("express", {"typescript": False}, "express-ts")
        assert "src/index.ts" in files
        assert "tsconfig.json" in files

    def test_fastify_rest_preset(self) -> None:
        assert "src/schemas/items.ts" in _compose("fastify", None, "fastify-rest")

    def test_nestjs_always_typed(self) -> None:
        files = _compose("nestjs")
        assert "src/main.ts" in files
        assert not any(path.endswith(".js") and path.startswith("src/") for path in files)

    def test_nestjs_graphql_preset(self) -> None:
        files = _compose("nestjs", {"graphql": False}, "nestjs-graphql")
        assert "src/app.resolver.ts" in files

    def test_node_database_dependency(self) -> None:
        files = _compose("express", {"database": "postgresql"})
        assert "pg" in json.loads(files["package.json"])["dependencies"]
        assert "src/db.ts" in files


class TestPython:
    def test_fastapi_postgresql(self) -> None:
        files = _compose("fastapi", {"database": "postgresql"})
        assert "psycopg2-binary>=2.9.9" in files["requirements.txt"].splitlines()
        assert "app/database.py" in files

    def test_fastapi_gunicorn_preset(self) -> None:
        files = _compose("fastapi", None, "fastapi-gunicorn")
        assert "gunicorn.conf.py" in files
        assert any(line.startswith("gunicorn") for line in files["requirements.txt"].splitlines())

    def test_fastapi_without_tests(self) -> None:
        files = _compose("fastapi", {"tests": False})
        assert "tests/test_main.py" not in files
        assert "requirements-dev.txt" not in files

    def test_django_package_uses_snake_name(self) -> None:
        files = _compose("django")
        assert "demo_app/settings.py" in files
        assert "demo_app/urls.py" in files

    def test_django_rest_preset(self) -> None:
        files = _compose("django", None, "django-rest")
        assert "core/serializers.py" in files
        assert "djangorestframework>=3.14.0" in files["requirements.txt"].splitlines()

    def test_flask_sqlalchemy_preset(self) -> None:
        files = _compose("flask", None, "flask-sqlalchemy")
        assert "app/models.py" in files
        assert "app/extensions.py" in files


class TestSpring:
    def test_java_package_path(self) -> None:
        builder = _BUILDERS["spring-boot"]
        nodes = builder.compose(builder.resolve({}), ProjectIdentity("demo"))
        paths = [node.path for node in nodes]
        assert "src/main/java/com/example/demo/DemoApplication.java" in paths
        assert "src/test/java/com/example/demo/DemoApplicationTests.java" in paths

    def test_webflux_preset(self) -> None:
        pom = _compose("spring-boot", None, "spring-webflux")["pom.xml"]
        assert "<artifactId>spring-boot-starter-webflux</artifactId>" in pom
        assert "<artifactId>spring-boot-starter-web</artifactId>" not in pom

    def test_mvc_default(self) -> None:
        pom = _compose("spring-boot")["pom.xml"]
        assert "<artifactId>spring-boot-starter-web</artifactId>" in pom
        assert "<artifactId>demo-app</artifactId>" in pom
