"""Browser-side families: React, Vue, Vite, Next.js, Nuxt."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scaffoldctl.domain.composer import (
    DependencyContribution,
    FamilySpec,
    FileContribution,
    all_of,
    disabled,
    enabled,
    equals,
)
from scaffoldctl.domain.options import OptionSpec, ResolvedOptions, with_choices, with_defaults
from scaffoldctl.domain.project import ProjectIdentity
from scaffoldctl.domain.types import Category
from scaffoldctl.frameworks.families.common import (
    FRONTEND_OPTIONS,
    NODE_GITIGNORE,
    PRETTIER_DEPS,
    PRETTIER_FILE,
    README,
    TAILWIND_DEPS,
    TAILWIND_FILES,
    static_context,
    typed,
    with_pinia,
    with_redux,
    with_zustand,
)

_REACT_STATE = ("none", "zustand", "redux")
_VUE_STATE = ("none", "pinia")

_STATIC_SITE_DOCKER = (
    FileContribution("Dockerfile", "Dockerfile.static.j2", enabled("docker")),
    FileContribution("docker-compose.yml", "docker-compose.yml.j2", enabled("docker")),
    FileContribution(".dockerignore", "dockerignore-node.j2", enabled("docker")),
    FileContribution("nginx.conf", "nginx.conf.j2", enabled("docker")),
)

# ---------------------------------------------------------------------------
# React
# ---------------------------------------------------------------------------

_vite = equals("bundler", "vite")
_cra = equals("bundler", "cra")


def _react_context(resolved: ResolvedOptions, identity: ProjectIdentity) -> Mapping[str, Any]:
    cra = resolved["bundler"] == "cra"
    html = "./public/index.html" if cra else "./index.html"
    return {
        "port": 3000 if cra else 5173,
        "container_port": 80,
        "tailwind_content": [html, "./src/**/*.{js,ts,jsx,tsx}"],
        "commands": ["npm install", "npm start" if cra else "npm run dev"],
        "test_command": "npm test",
    }


REACT = FamilySpec(
    name="react",
    label="React",
    category=Category.FRONTEND,
    aliases=("react", "react-vite", "react-cra"),
    options=(
        *with_choices(FRONTEND_OPTIONS, "stateManagement", _REACT_STATE),
        OptionSpec("bundler", "vite", str, ("vite", "cra"), description="Vite or Create React App"),
    ),
    presets={"react-vite": {"bundler": "vite"}, "react-cra": {"bundler": "cra"}},
    dependencies=(
        DependencyContribution(
            "scripts",
            {"dev": "vite", "build": "vite build", "preview": "vite preview"},
            _vite,
        ),
        DependencyContribution(
            "scripts",
            {
                "start": "react-scripts start",
                "build": "react-scripts build",
                "test": "react-scripts test",
                "eject": "react-scripts eject",
            },
            _cra,
        ),
        DependencyContribution("scripts", {"build": "tsc && vite build"}, all_of(_vite, typed)),
        DependencyContribution("scripts", {"test": "vitest"}, all_of(_vite, enabled("testing"))),
        DependencyContribution("scripts", {"lint": "eslint ."}, enabled("eslint")),
        DependencyContribution("scripts", {"format": "prettier --write src"}, enabled("prettier")),
        DependencyContribution("dependencies", {"react": "^18.2.0", "react-dom": "^18.2.0"}),
        DependencyContribution(
            "dependencies", {"react-scripts": "5.0.1", "web-vitals": "^2.1.4"}, _cra
        ),
        DependencyContribution("dependencies", {"zustand": "^4.4.7"}, with_zustand),
        DependencyContribution(
            "dependencies", {"@reduxjs/toolkit": "^2.0.1", "react-redux": "^9.0.4"}, with_redux
        ),
        DependencyContribution("dependencies", {"react-router-dom": "^6.21.1"}, enabled("router")),
        DependencyContribution(
            "devDependencies", {"@vitejs/plugin-react": "^4.2.1", "vite": "^5.0.8"}, _vite
        ),
        DependencyContribution(
            "devDependencies",
            {"@types/react": "^18.2.43", "@types/react-dom": "^18.2.17", "typescript": "^5.2.2"},
            typed,
        ),
        TAILWIND_DEPS,
        DependencyContribution(
            "devDependencies",
            {
                "eslint": "^8.55.0",
                "eslint-plugin-react-hooks": "^4.6.0",
                "eslint-plugin-react-refresh": "^0.4.5",
            },
            enabled("eslint"),
        ),
        DependencyContribution(
            "devDependencies",
            {"@typescript-eslint/eslint-plugin": "^6.14.0", "@typescript-eslint/parser": "^6.14.0"},
            all_of(enabled("eslint"), typed),
        ),
        PRETTIER_DEPS,
        DependencyContribution(
            "devDependencies",
            {"@testing-library/react": "^14.1.2", "@testing-library/jest-dom": "^6.1.5"},
            enabled("testing"),
        ),
        DependencyContribution(
            "devDependencies",
            {"vitest": "^1.1.0", "jsdom": "^23.0.1"},
            all_of(_vite, enabled("testing")),
        ),
    ),
    files=(
        FileContribution("package.json", "package.json.j2"),
        FileContribution("vite.config.{{ ext.script }}", "vite.config.j2", _vite),
        FileContribution("tsconfig.json", "tsconfig.json.j2", typed),
        FileContribution("tsconfig.node.json", "tsconfig.node.json.j2", all_of(_vite, typed)),
        FileContribution("index.html", "index.html.j2", _vite),
        FileContribution("public/index.html", "public-index.html.j2", _cra),
        FileContribution("src/main.{{ ext.component }}", "main.j2", _vite),
        FileContribution("src/index.{{ ext.component }}", "main.j2", _cra),
        FileContribution("src/vite-env.d.ts", "vite-env.d.ts.j2", all_of(_vite, typed)),
        FileContribution("src/App.{{ ext.component }}", "App.j2"),
        FileContribution("src/index.css", "index.css.j2"),
        *TAILWIND_FILES,
        FileContribution("src/store/counter.{{ ext.script }}", "store-zustand.j2", with_zustand),
        FileContribution("src/store/counterSlice.{{ ext.script }}", "store-slice.j2", with_redux),
        FileContribution("src/store/index.{{ ext.script }}", "store-redux.j2", with_redux),
        FileContribution("src/pages/Home.{{ ext.component }}", "page-home.j2", enabled("router")),
        FileContribution("src/pages/About.{{ ext.component }}", "page-about.j2", enabled("router")),
        FileContribution("src/App.test.{{ ext.component }}", "App.test.j2", enabled("testing")),
        FileContribution("src/setupTests.{{ ext.script }}", "setupTests.j2", enabled("testing")),
        FileContribution(".eslintrc.cjs", "eslintrc.cjs.j2", enabled("eslint")),
        PRETTIER_FILE,
        *_STATIC_SITE_DOCKER,
        NODE_GITIGNORE,
        README,
    ),
    context=_react_context,
)

# ---------------------------------------------------------------------------
# Vue
# ---------------------------------------------------------------------------

VUE = FamilySpec(
    name="vue",
    label="Vue",
    category=Category.VUE,
    aliases=("vue", "vue3", "vue-vite"),
    options=with_defaults(
        with_choices(FRONTEND_OPTIONS, "stateManagement", _VUE_STATE),
        eslint=True,
        prettier=True,
    ),
    dependencies=(
        DependencyContribution(
            "scripts",
            {"dev": "vite", "build": "vite build", "preview": "vite preview"},
        ),
        DependencyContribution("scripts", {"build": "vue-tsc && vite build"}, typed),
        DependencyContribution("scripts", {"test": "vitest"}, enabled("testing")),
        DependencyContribution(
            "scripts", {"lint": "eslint . --ext .vue,.js,.ts"}, enabled("eslint")
        ),
        DependencyContribution("scripts", {"format": "prettier --write src"}, enabled("prettier")),
        DependencyContribution("dependencies", {"vue": "^3.3.11"}),
        DependencyContribution("dependencies", {"pinia": "^2.1.7"}, with_pinia),
        DependencyContribution("dependencies", {"vue-router": "^4.2.5"}, enabled("router")),
        DependencyContribution(
            "devDependencies", {"@vitejs/plugin-vue": "^5.0.0", "vite": "^5.0.8"}
        ),
        DependencyContribution(
            "devDependencies", {"typescript": "^5.3.3", "vue-tsc": "^1.8.25"}, typed
        ),
        TAILWIND_DEPS,
        DependencyContribution(
            "devDependencies",
            {"eslint": "^8.55.0", "eslint-plugin-vue": "^9.19.2"},
            enabled("eslint"),
        ),
        DependencyContribution(
            "devDependencies",
            {"@vue/eslint-config-typescript": "^12.0.0"},
            all_of(enabled("eslint"), typed),
        ),
        PRETTIER_DEPS,
        DependencyContribution(
            "devDependencies",
            {"vitest": "^1.1.0", "jsdom": "^23.0.1", "@vue/test-utils": "^2.4.3"},
            enabled("testing"),
        ),
    ),
    files=(
        FileContribution("package.json", "esm-package.json.j2"),
        FileContribution("vite.config.{{ ext.script }}", "vite.config.j2"),
        FileContribution("tsconfig.json", "tsconfig.json.j2", typed),
        FileContribution("tsconfig.node.json", "tsconfig.node.json.j2", typed),
        FileContribution("env.d.ts", "env.d.ts.j2", typed),
        FileContribution("index.html", "index.html.j2"),
        FileContribution("src/main.{{ ext.script }}", "main.j2"),
        FileContribution("src/App.vue", "App.vue.j2"),
        FileContribution("src/style.css", "style.css.j2"),
        *TAILWIND_FILES,
        FileContribution("src/stores/counter.{{ ext.script }}", "store-pinia.j2", with_pinia),
        FileContribution("src/router/index.{{ ext.script }}", "router.j2", enabled("router")),
        FileContribution("src/views/Home.vue", "view-home.vue.j2", enabled("router")),
        FileContribution("src/views/About.vue", "view-about.vue.j2", enabled("router")),
        FileContribution(
            "src/__tests__/App.spec.{{ ext.script }}", "App.spec.j2", enabled("testing")
        ),
        FileContribution(".eslintrc.cjs", "eslintrc.cjs.j2", enabled("eslint")),
        PRETTIER_FILE,
        *_STATIC_SITE_DOCKER,
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=5173,
        tailwind_content=["./index.html", "./src/**/*.{vue,js,ts,jsx,tsx}"],
        container_port=80,
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)

# ---------------------------------------------------------------------------
# Vite (vanilla)
# ---------------------------------------------------------------------------

VITE = FamilySpec(
    name="vite",
    label="Vite",
    category=Category.FRONTEND,
    aliases=("vite", "vite-vanilla", "vite-ts"),
    options=tuple(
        spec
        for spec in FRONTEND_OPTIONS
        if spec.key in {"typescript", "tailwind", "eslint", "prettier", "testing", "docker"}
    ),
    presets={"vite-ts": {"typescript": True}},
    dependencies=(
        DependencyContribution(
            "scripts",
            {"dev": "vite", "build": "vite build", "preview": "vite preview"},
        ),
        DependencyContribution("scripts", {"build": "tsc && vite build"}, typed),
        DependencyContribution("scripts", {"test": "vitest"}, enabled("testing")),
        DependencyContribution("scripts", {"lint": "eslint src"}, enabled("eslint")),
        DependencyContribution("scripts", {"format": "prettier --write src"}, enabled("prettier")),
        DependencyContribution("devDependencies", {"vite": "^5.0.8"}),
        DependencyContribution("devDependencies", {"typescript": "^5.2.2"}, typed),
        TAILWIND_DEPS,
        DependencyContribution("devDependencies", {"eslint": "^8.55.0"}, enabled("eslint")),
        DependencyContribution(
            "devDependencies",
            {"@typescript-eslint/eslint-plugin": "^6.14.0", "@typescript-eslint/parser": "^6.14.0"},
            all_of(enabled("eslint"), typed),
        ),
        PRETTIER_DEPS,
        DependencyContribution(
            "devDependencies", {"vitest": "^1.1.0", "jsdom": "^23.0.1"}, enabled("testing")
        ),
    ),
    files=(
        FileContribution("package.json", "esm-package.json.j2"),
        FileContribution("vite.config.{{ ext.script }}", "vite.config.j2"),
        FileContribution("tsconfig.json", "tsconfig.json.j2", typed),
        FileContribution("index.html", "index.html.j2"),
        FileContribution("src/main.{{ ext.script }}", "main.j2"),
        FileContribution("src/counter.{{ ext.script }}", "counter.j2"),
        FileContribution("src/vite-env.d.ts", "vite-env.d.ts.j2", typed),
        FileContribution("src/style.css", "style.css.j2"),
        FileContribution("public/vite.svg", "vite.svg.j2"),
        *TAILWIND_FILES,
        FileContribution(
            "src/counter.test.{{ ext.script }}", "counter.test.j2", enabled("testing")
        ),
        FileContribution(".eslintrc.cjs", "eslintrc.cjs.j2", enabled("eslint")),
        PRETTIER_FILE,
        *_STATIC_SITE_DOCKER,
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=5173,
        tailwind_content=["./index.html", "./src/**/*.{js,ts}"],
        container_port=80,
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)

# ---------------------------------------------------------------------------
# Next.js
# ---------------------------------------------------------------------------

_app_router = enabled("appRouter")
_pages_router = disabled("appRouter")

NEXT = FamilySpec(
    name="next",
    label="Next.js",
    category=Category.NEXT,
    aliases=("next", "nextjs", "next-app", "next-pages"),
    options=(
        *with_defaults(
            with_choices(FRONTEND_OPTIONS, "stateManagement", _REACT_STATE),
            router=True,
            eslint=True,
            prettier=True,
        ),
        OptionSpec("appRouter", True, bool, description="App Router (True) or Pages Router"),
    ),
    presets={"next-app": {"appRouter": True}, "next-pages": {"appRouter": False}},
    dependencies=(
        DependencyContribution(
            "scripts",
            {"dev": "next dev", "build": "next build", "start": "next start"},
        ),
        DependencyContribution("scripts", {"lint": "next lint"}, enabled("eslint")),
        DependencyContribution("scripts", {"format": "prettier --write ."}, enabled("prettier")),
        DependencyContribution("scripts", {"test": "jest"}, enabled("testing")),
        DependencyContribution(
            "dependencies",
            {"next": "^14.0.4", "react": "^18.2.0", "react-dom": "^18.2.0"},
        ),
        DependencyContribution("dependencies", {"zustand": "^4.4.7"}, with_zustand),
        DependencyContribution(
            "dependencies", {"@reduxjs/toolkit": "^2.0.1", "react-redux": "^9.0.4"}, with_redux
        ),
        DependencyContribution(
            "devDependencies",
            {
                "@types/node": "^20.10.5",
                "@types/react": "^18.2.45",
                "@types/react-dom": "^18.2.18",
                "typescript": "^5.3.3",
            },
            typed,
        ),
        TAILWIND_DEPS,
        DependencyContribution(
            "devDependencies",
            {"eslint": "^8.56.0", "eslint-config-next": "^14.0.4"},
            enabled("eslint"),
        ),
        PRETTIER_DEPS,
        DependencyContribution(
            "devDependencies",
            {"prettier-plugin-tailwindcss": "^0.5.7"},
            all_of(enabled("prettier"), enabled("tailwind")),
        ),
        DependencyContribution(
            "devDependencies",
            {"eslint-config-prettier": "^9.1.0"},
            all_of(enabled("eslint"), enabled("prettier")),
        ),
        DependencyContribution(
            "devDependencies",
            {
                "@testing-library/react": "^14.1.2",
                "@testing-library/jest-dom": "^6.1.5",
                "jest": "^29.7.0",
                "jest-environment-jsdom": "^29.7.0",
            },
            enabled("testing"),
        ),
    ),
    files=(
        FileContribution("package.json", "package.json.j2"),
        FileContribution("next.config.js", "next.config.js.j2"),
        FileContribution("tsconfig.json", "tsconfig.json.j2", typed),
        FileContribution("next-env.d.ts", "next-env.d.ts.j2", typed),
        FileContribution("app/layout.{{ ext.component }}", "app-layout.j2", _app_router),
        FileContribution("app/page.{{ ext.component }}", "app-page.j2", _app_router),
        FileContribution("app/globals.css", "globals.css.j2", _app_router),
        FileContribution(
            "app/about/page.{{ ext.component }}",
            "about.j2",
            all_of(_app_router, enabled("router")),
        ),
        FileContribution("pages/_app.{{ ext.component }}", "pages-app.j2", _pages_router),
        FileContribution("pages/index.{{ ext.component }}", "pages-index.j2", _pages_router),
        FileContribution("styles/globals.css", "globals.css.j2", _pages_router),
        FileContribution(
            "pages/about.{{ ext.component }}",
            "about.j2",
            all_of(_pages_router, enabled("router")),
        ),
        FileContribution(
            "components/Providers.{{ ext.component }}",
            "providers.j2",
            all_of(_app_router, with_redux),
        ),
        FileContribution("public/favicon.svg", "favicon.svg.j2"),
        *TAILWIND_FILES,
        FileContribution("store/counter.{{ ext.script }}", "store-zustand.j2", with_zustand),
        FileContribution("store/counterSlice.{{ ext.script }}", "store-slice.j2", with_redux),
        FileContribution("store/index.{{ ext.script }}", "store-redux.j2", with_redux),
        FileContribution("jest.config.js", "jest.config.js.j2", enabled("testing")),
        FileContribution("jest.setup.js", "jest.setup.js.j2", enabled("testing")),
        FileContribution(
            "__tests__/home.test.{{ ext.component }}", "home.test.j2", enabled("testing")
        ),
        FileContribution(".eslintrc.json", "eslintrc.json.j2", enabled("eslint")),
        PRETTIER_FILE,
        FileContribution("Dockerfile", "Dockerfile.j2", enabled("docker")),
        FileContribution("docker-compose.yml", "docker-compose.yml.j2", enabled("docker")),
        FileContribution(".dockerignore", "dockerignore-node.j2", enabled("docker")),
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=3000,
        tailwind_content=[
            "./app/**/*.{js,ts,jsx,tsx,mdx}",
            "./pages/**/*.{js,ts,jsx,tsx,mdx}",
            "./components/**/*.{js,ts,jsx,tsx,mdx}",
        ],
        cjs_config=True,
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)

# ---------------------------------------------------------------------------
# Nuxt
# ---------------------------------------------------------------------------

NUXT = FamilySpec(
    name="nuxt",
    label="Nuxt",
    category=Category.VUE,
    aliases=("nuxt", "nuxt3"),
    options=with_defaults(
        with_choices(FRONTEND_OPTIONS, "stateManagement", _VUE_STATE),
        eslint=True,
        prettier=True,
    ),
    dependencies=(
        DependencyContribution(
            "scripts",
            {
                "build": "nuxt build",
                "dev": "nuxt dev",
                "generate": "nuxt generate",
                "preview": "nuxt preview",
                "postinstall": "nuxt prepare",
            },
        ),
        DependencyContribution("scripts", {"lint": "eslint ."}, enabled("eslint")),
        DependencyContribution("scripts", {"format": "prettier --write ."}, enabled("prettier")),
        DependencyContribution("scripts", {"test": "vitest"}, enabled("testing")),
        DependencyContribution(
            "dependencies",
            {"nuxt": "^3.9.0", "vue": "^3.4.0", "vue-router": "^4.2.5"},
        ),
        DependencyContribution("dependencies", {"pinia": "^2.1.7"}, with_pinia),
        DependencyContribution("devDependencies", {"@pinia/nuxt": "^0.5.1"}, with_pinia),
        DependencyContribution("devDependencies", {"typescript": "^5.3.3"}, typed),
        DependencyContribution(
            "devDependencies", {"@nuxtjs/tailwindcss": "^6.10.1"}, enabled("tailwind")
        ),
        DependencyContribution(
            "devDependencies",
            {"@nuxt/eslint-config": "^0.2.0", "eslint": "^8.56.0"},
            enabled("eslint"),
        ),
        PRETTIER_DEPS,
        DependencyContribution(
            "devDependencies",
            {"@nuxt/test-utils": "^3.9.0", "@vue/test-utils": "^2.4.3", "vitest": "^1.1.0"},
            enabled("testing"),
        ),
    ),
    files=(
        FileContribution("package.json", "esm-package.json.j2"),
        FileContribution("nuxt.config.{{ ext.script }}", "nuxt.config.j2"),
        FileContribution("tsconfig.json", "tsconfig.json.j2", typed),
        FileContribution("app.vue", "app.vue.j2"),
        FileContribution("layouts/default.vue", "layout-default.vue.j2"),
        FileContribution("pages/index.vue", "page-index.vue.j2"),
        FileContribution("pages/about.vue", "page-about.vue.j2", enabled("router")),
        FileContribution("pages/counter.vue", "page-counter.vue.j2"),
        FileContribution("assets/css/main.css", "main.css.j2"),
        FileContribution("public/favicon.svg", "favicon.svg.j2"),
        FileContribution(
            "tailwind.config.{{ ext.script }}", "tailwind.config.j2", enabled("tailwind")
        ),
        FileContribution("stores/counter.{{ ext.script }}", "store-pinia.j2", with_pinia),
        FileContribution("vitest.config.{{ ext.script }}", "vitest.config.j2", enabled("testing")),
        FileContribution(
            "tests/counter.spec.{{ ext.script }}", "counter.spec.j2", enabled("testing")
        ),
        FileContribution(".eslintrc.cjs", "eslintrc.cjs.j2", enabled("eslint")),
        PRETTIER_FILE,
        FileContribution("Dockerfile", "Dockerfile.j2", enabled("docker")),
        FileContribution("docker-compose.yml", "docker-compose.yml.j2", enabled("docker")),
        FileContribution(".dockerignore", "dockerignore-node.j2", enabled("docker")),
        FileContribution(".gitignore", "gitignore.j2"),
        README,
    ),
    context=static_context(
        port=3000,
        tailwind_content=[
            "./components/**/*.{vue,js,ts}",
            "./layouts/**/*.vue",
            "./pages/**/*.vue",
            "./app.vue",
        ],
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)
