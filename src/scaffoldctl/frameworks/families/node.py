"""Node.js backend families: Express, Fastify, NestJS."""

from __future__ import annotations

from scaffoldctl.domain.composer import (
    DependencyContribution,
    FamilySpec,
    FileContribution,
    all_of,
    disabled,
    enabled,
    equals,
    one_of,
)
from scaffoldctl.domain.options import OptionSpec
from scaffoldctl.domain.types import Category
from scaffoldctl.frameworks.families.common import (
    ENV_EXAMPLE,
    NODE_DATABASE_DEPS,
    NODE_DOCKER_FILES,
    NODE_GITIGNORE,
    NODE_OPTIONS,
    README,
    has_database,
    static_context,
    typed,
)

_untyped = disabled("typescript")
_tests = enabled("tests")
_rest = enabled("rest")
_sql = one_of("database", "postgresql", "mysql")

_REST_OPTION = OptionSpec("rest", False, bool, description="Add a validated REST resource")

_TYPED_SCRIPTS = DependencyContribution(
    "scripts",
    {
        "dev": "nodemon --watch src --ext ts --exec ts-node src/index.ts",
        "build": "tsc",
        "start": "node dist/index.js",
    },
    typed,
)
_UNTYPED_SCRIPTS = DependencyContribution(
    "scripts",
    {"dev": "nodemon src/index.js", "start": "node src/index.js"},
    _untyped,
)
_TEST_DEPS = (
    DependencyContribution("scripts", {"test": "jest"}, _tests),
    DependencyContribution("devDependencies", {"jest": "^29.7.0"}, _tests),
    DependencyContribution(
        "devDependencies",
        {"ts-jest": "^29.1.1", "@types/jest": "^29.5.11"},
        all_of(_tests, typed),
    ),
)

# ---------------------------------------------------------------------------
# Express
# ---------------------------------------------------------------------------

EXPRESS = FamilySpec(
    name="express",
    label="Express",
    category=Category.NODE,
    aliases=("express", "express-ts", "express-rest"),
    options=(*NODE_OPTIONS, _REST_OPTION),
    presets={"express-ts": {"typescript": True}, "express-rest": {"rest": True}},
    dependencies=(
        _TYPED_SCRIPTS,
        _UNTYPED_SCRIPTS,
        DependencyContribution(
            "dependencies",
            {
                "express": "^4.18.2",
                "dotenv": "^16.3.1",
                "cors": "^2.8.5",
                "helmet": "^7.1.0",
                "morgan": "^1.10.0",
            },
        ),
        DependencyContribution("dependencies", {"express-validator": "^7.0.1"}, _rest),
        *NODE_DATABASE_DEPS,
        DependencyContribution("devDependencies", {"nodemon": "^3.0.2"}),
        DependencyContribution(
            "devDependencies",
            {
                "@types/express": "^4.17.21",
                "@types/node": "^20.10.5",
                "@types/cors": "^2.8.17",
                "@types/morgan": "^1.9.9",
                "typescript": "^5.3.3",
                "ts-node": "^10.9.2",
            },
            typed,
        ),
        *_TEST_DEPS,
        DependencyContribution("devDependencies", {"supertest": "^6.3.3"}, _tests),
        DependencyContribution(
            "devDependencies", {"@types/supertest": "^2.0.16"}, all_of(_tests, typed)
        ),
    ),
    files=(
        FileContribution("package.json", "node-package.json.j2"),
        FileContribution("tsconfig.json", "node-tsconfig.json.j2", typed),
        FileContribution("src/index.{{ ext.script }}", "index.j2"),
        FileContribution("src/app.{{ ext.script }}", "app.j2"),
        FileContribution("src/routes.{{ ext.script }}", "routes.j2"),
        FileContribution("src/config.{{ ext.script }}", "node-config.j2"),
        FileContribution("src/middleware/errorHandler.{{ ext.script }}", "errorHandler.j2"),
        FileContribution("src/resources/items.{{ ext.script }}", "items.j2", _rest),
        FileContribution("src/db.{{ ext.script }}", "node-db.j2", has_database),
        ENV_EXAMPLE,
        FileContribution("jest.config.js", "node-jest.config.js.j2", _tests),
        FileContribution("tests/app.test.{{ ext.script }}", "app.test.j2", _tests),
        *NODE_DOCKER_FILES,
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=3000,
        env_defaults={"NODE_ENV": "development"},
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)

# ---------------------------------------------------------------------------
# Fastify
# ---------------------------------------------------------------------------

FASTIFY = FamilySpec(
    name="fastify",
    label="Fastify",
    category=Category.NODE,
    aliases=("fastify", "fastify-ts", "fastify-rest"),
    options=(*NODE_OPTIONS, _REST_OPTION),
    presets={"fastify-ts": {"typescript": True}, "fastify-rest": {"rest": True}},
    dependencies=(
        _TYPED_SCRIPTS,
        _UNTYPED_SCRIPTS,
        DependencyContribution(
            "dependencies",
            {
                "fastify": "^4.25.2",
                "@fastify/cors": "^8.5.0",
                "@fastify/helmet": "^11.1.1",
                "@fastify/swagger": "^8.13.0",
                "@fastify/swagger-ui": "^2.1.0",
                "fastify-plugin": "^4.5.1",
                "dotenv": "^16.3.1",
            },
        ),
        DependencyContribution(
            "dependencies",
            {"fastify-type-provider-zod": "^1.1.2", "zod": "^3.22.4"},
            _rest,
        ),
        *NODE_DATABASE_DEPS,
        DependencyContribution("devDependencies", {"nodemon": "^3.0.2"}),
        DependencyContribution(
            "devDependencies",
            {"@types/node": "^20.10.5", "typescript": "^5.3.3", "ts-node": "^10.9.2"},
            typed,
        ),
        *_TEST_DEPS,
    ),
    files=(
        FileContribution("package.json", "node-package.json.j2"),
        FileContribution("tsconfig.json", "node-tsconfig.json.j2", typed),
        FileContribution("src/index.{{ ext.script }}", "index.j2"),
        FileContribution("src/app.{{ ext.script }}", "app.j2"),
        FileContribution("src/routes.{{ ext.script }}", "routes.j2"),
        FileContribution("src/plugins/index.{{ ext.script }}", "plugins.j2"),
        FileContribution("src/config.{{ ext.script }}", "node-config.j2"),
        FileContribution("src/schemas/items.{{ ext.script }}", "items.j2", _rest),
        FileContribution("src/db.{{ ext.script }}", "node-db.j2", has_database),
        ENV_EXAMPLE,
        FileContribution("jest.config.js", "node-jest.config.js.j2", _tests),
        FileContribution("tests/app.test.{{ ext.script }}", "app.test.j2", _tests),
        *NODE_DOCKER_FILES,
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=3000,
        env_defaults={"NODE_ENV": "development"},
        commands=["npm install", "npm run dev"],
        test_command="npm test",
    ),
)

# ---------------------------------------------------------------------------
# NestJS
# ---------------------------------------------------------------------------

_graphql = enabled("graphql")

NESTJS = FamilySpec(
    name="nestjs",
    label="NestJS",
    category=Category.NODE,
    aliases=("nestjs", "nest", "nestjs-rest", "nestjs-graphql"),
    options=(
        *(spec for spec in NODE_OPTIONS if spec.key != "typescript"),
        OptionSpec("graphql", False, bool, description="Add a code-first GraphQL module"),
    ),
    presets={"nestjs-rest": {"graphql": False}, "nestjs-graphql": {"graphql": True}},
    typed_default=True,
    dependencies=(
        DependencyContribution(
            "scripts",
            {
                "build": "nest build",
                "format": 'prettier --write "src/**/*.ts" "test/**/*.ts"',
                "start": "nest start",
                "start:dev": "nest start --watch",
                "start:prod": "node dist/main",
                "lint": 'eslint "{src,test}/**/*.ts" --fix',
            },
        ),
        DependencyContribution(
            "scripts",
            {"test": "jest", "test:e2e": "jest --config ./test/jest-e2e.json"},
            _tests,
        ),
        DependencyContribution(
            "dependencies",
            {
                "@nestjs/common": "^10.3.0",
                "@nestjs/core": "^10.3.0",
                "@nestjs/platform-express": "^10.3.0",
                "@nestjs/config": "^3.1.1",
                "@nestjs/swagger": "^7.1.17",
                "reflect-metadata": "^0.2.1",
                "rxjs": "^7.8.1",
                "class-validator": "^0.14.0",
                "class-transformer": "^0.5.1",
            },
        ),
        DependencyContribution(
            "dependencies",
            {
                "@nestjs/graphql": "^12.0.11",
                "@nestjs/apollo": "^12.0.11",
                "@apollo/server": "^4.9.5",
                "graphql": "^16.8.1",
            },
            _graphql,
        ),
        DependencyContribution(
            "dependencies", {"@nestjs/typeorm": "^10.0.1", "typeorm": "^0.3.17"}, _sql
        ),
        DependencyContribution("dependencies", {"pg": "^8.11.3"}, equals("database", "postgresql")),
        DependencyContribution("dependencies", {"mysql2": "^3.6.5"}, equals("database", "mysql")),
        DependencyContribution(
            "dependencies",
            {"@nestjs/mongoose": "^10.0.2", "mongoose": "^8.0.3"},
            equals("database", "mongodb"),
        ),
        DependencyContribution(
            "devDependencies",
            {
                "@nestjs/cli": "^10.3.0",
                "@nestjs/schematics": "^10.1.0",
                "@types/express": "^4.17.21",
                "@types/node": "^20.10.5",
                "@typescript-eslint/eslint-plugin": "^6.18.0",
                "@typescript-eslint/parser": "^6.18.0",
                "eslint": "^8.56.0",
                "eslint-config-prettier": "^9.1.0",
                "eslint-plugin-prettier": "^5.1.2",
                "prettier": "^3.1.1",
                "source-map-support": "^0.5.21",
                "ts-loader": "^9.5.1",
                "ts-node": "^10.9.2",
                "tsconfig-paths": "^4.2.0",
                "typescript": "^5.3.3",
            },
        ),
        DependencyContribution(
            "devDependencies",
            {
                "@nestjs/testing": "^10.3.0",
                "@types/jest": "^29.5.11",
                "@types/supertest": "^2.0.16",
                "jest": "^29.7.0",
                "supertest": "^6.3.3",
                "ts-jest": "^29.1.1",
            },
            _tests,
        ),
    ),
    files=(
        FileContribution("package.json", "package.json.j2"),
        FileContribution("tsconfig.json", "tsconfig.json.j2"),
        FileContribution("tsconfig.build.json", "tsconfig.build.json.j2"),
        FileContribution("nest-cli.json", "nest-cli.json.j2"),
        FileContribution("src/main.ts", "main.ts.j2"),
        FileContribution("src/app.module.ts", "app.module.ts.j2"),
        FileContribution("src/app.controller.ts", "app.controller.ts.j2"),
        FileContribution("src/app.service.ts", "app.service.ts.j2"),
        FileContribution("src/app.resolver.ts", "app.resolver.ts.j2", _graphql),
        FileContribution("src/config.ts", "config.ts.j2"),
        FileContribution("src/database/database.module.ts", "database.module.ts.j2", has_database),
        FileContribution("src/app.controller.spec.ts", "app.controller.spec.ts.j2", _tests),
        FileContribution("test/app.e2e-spec.ts", "app.e2e-spec.ts.j2", _tests),
        FileContribution("test/jest-e2e.json", "jest-e2e.json.j2", _tests),
        ENV_EXAMPLE,
        FileContribution(".eslintrc.js", "eslintrc.js.j2"),
        FileContribution(".prettierrc", "prettierrc.j2"),
        *NODE_DOCKER_FILES,
        NODE_GITIGNORE,
        README,
    ),
    context=static_context(
        port=3000,
        start_script="start:prod",
        env_defaults={"NODE_ENV": "development"},
        commands=["npm install", "npm run start:dev"],
        test_command="npm test",
    ),
)
