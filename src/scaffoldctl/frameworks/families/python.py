"""Python backend families: FastAPI, Django, Flask."""

from __future__ import annotations

from scaffoldctl.domain.composer import (
    DependencyContribution,
    FamilySpec,
    FileContribution,
    any_of,
    enabled,
    equals,
    one_of,
)
from scaffoldctl.domain.options import OptionSpec, with_choices
from scaffoldctl.domain.types import Category, Database
from scaffoldctl.frameworks.families.common import (
    ENV_EXAMPLE,
    PYTHON_DATABASE_DEPS,
    PYTHON_DOCKER_FILES,
    PYTHON_GITIGNORE,
    PYTHON_OPTIONS,
    README,
    has_database,
    static_context,
)

_tests = enabled("tests")
_sql = one_of("database", "postgresql", "mysql", "sqlite")

_REQUIREMENTS = FileContribution("requirements.txt", "requirements.txt.j2")
_DEV_REQUIREMENTS = FileContribution("requirements-dev.txt", "requirements-dev.txt.j2", _tests)
_VENV_COMMANDS = (
    "python -m venv .venv",
    "source .venv/bin/activate",
    "pip install -r requirements.txt",
)

# ---------------------------------------------------------------------------
# FastAPI
# ---------------------------------------------------------------------------

_gunicorn = equals("server", "gunicorn")

FASTAPI = FamilySpec(
    name="fastapi",
    label="FastAPI",
    category=Category.PYTHON,
    aliases=("fastapi", "fastapi-uvicorn", "fastapi-gunicorn"),
    options=(
        *with_choices(
            PYTHON_OPTIONS, "database", tuple(db.value for db in Database if db != "h2")
        ),
        OptionSpec(
            "server", "uvicorn", str, ("uvicorn", "gunicorn"), description="Production ASGI server"
        ),
    ),
    presets={"fastapi-uvicorn": {"server": "uvicorn"}, "fastapi-gunicorn": {"server": "gunicorn"}},
    dependencies=(
        DependencyContribution(
            "requirements",
            {
                "fastapi": ">=0.104.0",
                "uvicorn[standard]": ">=0.24.0",
                "pydantic": ">=2.0.0",
                "pydantic-settings": ">=2.0.0",
                "python-dotenv": ">=1.0.0",
            },
        ),
        DependencyContribution("requirements", {"gunicorn": ">=21.2.0"}, _gunicorn),
        DependencyContribution("requirements", {"SQLAlchemy": ">=2.0.23"}, _sql),
        *PYTHON_DATABASE_DEPS,
        DependencyContribution("requirements", {"motor": ">=3.3.2"}, equals("database", "mongodb")),
        DependencyContribution(
            "dev-requirements", {"pytest": ">=7.4.0", "httpx": ">=0.25.0"}, _tests
        ),
    ),
    files=(
        FileContribution("pyproject.toml", "pyproject.toml.j2"),
        _REQUIREMENTS,
        _DEV_REQUIREMENTS,
        FileContribution("app/__init__.py"),
        FileContribution("app/main.py", "main.py.j2"),
        FileContribution("app/config.py", "config.py.j2"),
        FileContribution("app/api/__init__.py"),
        FileContribution("app/api/routes.py", "routes.py.j2"),
        FileContribution("app/models/__init__.py"),
        FileContribution("app/services/__init__.py"),
        FileContribution("app/database.py", "database.py.j2", has_database),
        FileContribution("gunicorn.conf.py", "gunicorn.conf.py.j2", _gunicorn),
        FileContribution("tests/__init__.py", when=_tests),
        FileContribution("tests/test_main.py", "test_main.py.j2", _tests),
        ENV_EXAMPLE,
        *PYTHON_DOCKER_FILES,
        PYTHON_GITIGNORE,
        README,
    ),
    context=static_context(
        port=8000,
        mysql_scheme="mysql+pymysql",
        env_defaults={"DEBUG": "true"},
        commands=[*_VENV_COMMANDS, "uvicorn app.main:app --reload"],
        test_command="pytest",
    ),
)

# ---------------------------------------------------------------------------
# Django
# ---------------------------------------------------------------------------

_rest = enabled("rest")
_cms = enabled("cms")

DJANGO = FamilySpec(
    name="django",
    label="Django",
    category=Category.PYTHON,
    aliases=("django", "django-rest", "django-cms"),
    options=(
        *PYTHON_OPTIONS,
        OptionSpec("rest", False, bool, description="Add Django REST framework"),
        OptionSpec("cms", False, bool, description="Add django CMS"),
    ),
    presets={"django-rest": {"rest": True}, "django-cms": {"cms": True}},
    dependencies=(
        DependencyContribution(
            "requirements",
            {"Django": ">=5.0.0", "python-dotenv": ">=1.0.0", "dj-database-url": ">=2.1.0"},
        ),
        DependencyContribution(
            "requirements",
            {"djangorestframework": ">=3.14.0", "django-cors-headers": ">=4.3.0"},
            _rest,
        ),
        DependencyContribution(
            "requirements",
            {
                "django-cms": ">=4.1.0",
                "djangocms-admin-style": ">=3.2.6",
                "django-treebeard": ">=4.7",
                "django-sekizai": ">=4.1.0",
                "Pillow": ">=10.0.0",
            },
            _cms,
        ),
        DependencyContribution(
            "requirements", {"psycopg2-binary": ">=2.9.9"}, equals("database", "postgresql")
        ),
        DependencyContribution(
            "requirements", {"mysqlclient": ">=2.2.0"}, equals("database", "mysql")
        ),
        DependencyContribution("requirements", {"gunicorn": ">=21.2.0"}, enabled("docker")),
        DependencyContribution(
            "dev-requirements", {"pytest": ">=7.4.0", "pytest-django": ">=4.7.0"}, _tests
        ),
    ),
    files=(
        _REQUIREMENTS,
        _DEV_REQUIREMENTS,
        FileContribution("manage.py", "manage.py.j2"),
        FileContribution("{{ project.snake }}/__init__.py"),
        FileContribution("{{ project.snake }}/settings.py", "settings.py.j2"),
        FileContribution("{{ project.snake }}/urls.py", "urls.py.j2"),
        FileContribution("{{ project.snake }}/wsgi.py", "wsgi.py.j2"),
        FileContribution("{{ project.snake }}/asgi.py", "asgi.py.j2"),
        FileContribution("core/__init__.py"),
        FileContribution("core/apps.py", "apps.py.j2"),
        FileContribution("core/views.py", "views.py.j2"),
        FileContribution("core/urls.py", "core_urls.py.j2"),
        FileContribution("core/serializers.py", "serializers.py.j2", _rest),
        FileContribution("templates/base.html", "base.html.j2", _cms),
        FileContribution("pytest.ini", "pytest.ini.j2", _tests),
        FileContribution("tests/__init__.py", when=_tests),
        FileContribution("tests/test_views.py", "test_views.py.j2", _tests),
        ENV_EXAMPLE,
        *PYTHON_DOCKER_FILES,
        PYTHON_GITIGNORE,
        README,
    ),
    context=static_context(
        port=8000,
        env_defaults={"DEBUG": "true", "SECRET_KEY": "change-me"},
        commands=[*_VENV_COMMANDS, "python manage.py migrate", "python manage.py runserver"],
        test_command="pytest",
    ),
)

# ---------------------------------------------------------------------------
# Flask
# ---------------------------------------------------------------------------

_restful = equals("extension", "restful")
_orm = any_of(equals("extension", "sqlalchemy"), has_database)

FLASK = FamilySpec(
    name="flask",
    label="Flask",
    category=Category.PYTHON,
    aliases=("flask", "flask-rest", "flask-sqlalchemy"),
    options=(
        *PYTHON_OPTIONS,
        OptionSpec(
            "extension",
            "none",
            str,
            ("none", "restful", "sqlalchemy"),
            description="Flask extension to preconfigure",
        ),
    ),
    presets={
        "flask-rest": {"extension": "restful"},
        "flask-sqlalchemy": {"extension": "sqlalchemy"},
    },
    dependencies=(
        DependencyContribution("requirements", {"Flask": ">=3.0.0", "python-dotenv": ">=1.0.0"}),
        DependencyContribution(
            "requirements", {"flask-restful": ">=0.3.10", "flask-cors": ">=4.0.0"}, _restful
        ),
        DependencyContribution(
            "requirements", {"Flask-SQLAlchemy": ">=3.1.1", "Flask-Migrate": ">=4.0.5"}, _orm
        ),
        *PYTHON_DATABASE_DEPS,
        DependencyContribution("requirements", {"gunicorn": ">=21.2.0"}, enabled("docker")),
        DependencyContribution("dev-requirements", {"pytest": ">=7.4.0"}, _tests),
    ),
    files=(
        _REQUIREMENTS,
        _DEV_REQUIREMENTS,
        FileContribution("run.py", "run.py.j2"),
        FileContribution("app/__init__.py", "init.py.j2"),
        FileContribution("app/config.py", "config.py.j2"),
        FileContribution("app/routes.py", "routes.py.j2"),
        FileContribution("app/extensions.py", "extensions.py.j2", _orm),
        FileContribution("app/models.py", "models.py.j2", _orm),
        FileContribution("app/resources.py", "resources.py.j2", _restful),
        FileContribution("tests/__init__.py", when=_tests),
        FileContribution("tests/conftest.py", "conftest.py.j2", _tests),
        FileContribution("tests/test_app.py", "test_app.py.j2", _tests),
        ENV_EXAMPLE,
        *PYTHON_DOCKER_FILES,
        PYTHON_GITIGNORE,
        README,
    ),
    context=static_context(
        port=5000,
        mysql_scheme="mysql+pymysql",
        env_defaults={"FLASK_DEBUG": "1", "SECRET_KEY": "change-me"},
        commands=[*_VENV_COMMANDS, "python run.py"],
        test_command="pytest",
    ),
)
