"""Tests for ScaffoldSettings: TOML source, env vars, and derived paths."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from scaffoldctl.config.settings import ScaffoldSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path)
        assert settings.base_dir == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.build.options == {}
        assert settings.plugins.enabled is True
        assert settings.mcp.transport == "stdio"
        assert settings.mcp.port == 8000

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_optional_paths_unset(self, tmp_path: Path) -> None:
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path)
        assert settings.template_dir is None
        assert settings.plugin_dir is None

    def test_output_root_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path)
        assert settings.output_root == elsewhere.resolve()


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "scaffoldctl.toml").write_text(
            '[build]\noutput_root = "out"\ntemplate_dir = "tpl"\n'
            '[build.options]\ndocker = false\n'
            '[mcp]\nport = 9100\n',
            encoding="utf-8",
        )
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path)

        assert settings.build.options == {"docker": False}
        assert settings.output_root == (tmp_path / "out").resolve()
        assert settings.template_dir == (tmp_path / "tpl").resolve()
        assert settings.mcp.port == 9100
        assert settings.mcp.host == "127.0.0.1"

    def test_walk_up_sets_base_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "scaffoldctl.toml").write_text("[plugins]\nenabled = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        settings = ScaffoldSettings.from_cli()

        assert settings.base_dir == tmp_path.resolve()
        assert settings.plugins.enabled is False

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "custom.toml"
        custom.parent.mkdir()
        custom.write_text('[plugins]\nlocal_dir = "plugins"\n')

        settings = ScaffoldSettings.from_cli(config_path=str(custom))

        assert settings.config_path == custom
        assert settings.plugin_dir == (tmp_path / "conf" / "plugins").resolve()

    def test_missing_explicit_config_is_ignored(self, tmp_path: Path) -> None:
        settings = ScaffoldSettings.from_cli(
            config_path=str(tmp_path / "nope.toml"), base_dir=tmp_path
        )
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "scaffoldctl.toml").write_text("[build\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ScaffoldSettings.from_cli(base_dir=tmp_path)

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        config = f'[build]\noutput_root = "{target.as_posix()}"\n'
        (tmp_path / "scaffoldctl.toml").write_text(config)
        assert ScaffoldSettings.from_cli(base_dir=tmp_path).output_root == target


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "scaffoldctl.toml").write_text("[mcp]\nport = 9100\n")
        monkeypatch.setenv("SCAFFOLDCTL_MCP__PORT", "9200")
        assert ScaffoldSettings.from_cli(base_dir=tmp_path).mcp.port == 9200

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCAFFOLDCTL_QUIET", "true")
        settings = ScaffoldSettings.from_cli(base_dir=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_alone(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCAFFOLDCTL_VERBOSE", "1")
        assert ScaffoldSettings.from_cli(base_dir=tmp_path).verbose is True
