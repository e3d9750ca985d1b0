"""ScaffoldSettings: one frozen object for flags, env vars and the TOML file.

Sources, strongest first:

1. keyword arguments (global CLI flags, MCP server arguments)
2. ``SCAFFOLDCTL_*`` environment variables, ``__`` between nested keys
3. ``scaffoldctl.toml``
4. defaults from :mod:`scaffoldctl.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from scaffoldctl.config.discovery import find_config
from scaffoldctl.config.models import BuildConfig, McpConfig, PluginsConfig

# File picked by from_cli(), read while the settings object is constructed.
_pending_toml: ContextVar[Path | None] = ContextVar("scaffoldctl_pending_toml", default=None)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class ScaffoldTomlSource(PydanticBaseSettingsSource):
    """Top-level tables of ``scaffoldctl.toml`` as a settings source."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._tables = _read_toml(path) if path is not None and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._tables.get(field_name), field_name, field_name in self._tables

    def __call__(self) -> dict[str, Any]:
        return dict(self._tables)


class ScaffoldSettings(BaseSettings):
    """Settings shared by the CLI and the MCP server.

    ``base_dir`` anchors every relative path in the file: the directory
    holding ``scaffoldctl.toml``, else the working directory.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCAFFOLDCTL_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    build: BuildConfig = Field(default_factory=BuildConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            ScaffoldTomlSource(settings_cls, _pending_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_dir: Path | None = None,
        **cli_flags: Any,
    ) -> ScaffoldSettings:
        """Build settings for one invocation.

        An explicit *config_path* that does not exist means "no file"; it
        does not fall back to discovery.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(base_dir)

        if base_dir is None:
            base_dir = toml_path.parent.resolve() if toml_path is not None else Path.cwd()

        token = _pending_toml.set(toml_path)
        try:
            return cls(base_dir=base_dir, config_path=toml_path, **cli_flags)
        finally:
            _pending_toml.reset(token)

    def _anchor(self, path: Path) -> Path:
        path = path.expanduser()
        return path if path.is_absolute() else (self.base_dir / path).resolve()

    @property
    def output_root(self) -> Path:
        """Directory projects land in when a request names no target root.

        ``[build] output_root`` when configured, else the working directory
        at call time; ``base_dir`` only anchors a relative configured value.
        """
        if self.build.output_root is None:
            return Path.cwd().resolve()
        return self._anchor(self.build.output_root)

    @property
    def template_dir(self) -> Path | None:
        if self.build.template_dir is None:
            return None
        return self._anchor(self.build.template_dir)

    @property
    def plugin_dir(self) -> Path | None:
        if self.plugins.local_dir is None:
            return None
        return self._anchor(self.plugins.local_dir)
