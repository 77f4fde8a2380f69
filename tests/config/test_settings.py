"""Tests for StaffSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from staffctl.config.settings import StaffSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("STAFFCTL_CONFIG", "STAFFCTL_DATA_FILE", "STAFFCTL_DATA__FILE"):
        monkeypatch.delenv(name, raising=False)


class TestStaffSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = StaffSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.json_output is False
        assert settings.no_color is False
        assert settings.data.file == "staffctl.json"
        assert settings.console.cancel_token == "/"
        assert settings.console.error_header == "[error]"
        assert settings.console.title_width == 80
        assert settings.mcp.transport == "stdio"

    def test_default_data_path(self, tmp_path: Path) -> None:
        settings = StaffSettings.from_cli(root=tmp_path)
        assert settings.data_path == tmp_path / "staffctl.json"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = StaffSettings.from_cli(root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "staffctl.toml").write_text(
            '[data]\nfile = "company.json"\n[console]\nerror_header = "[エラー]"\n',
            encoding="utf-8",
        )
        settings = StaffSettings.from_cli(root=tmp_path)
        assert settings.data_path == tmp_path / "company.json"
        assert settings.console.error_header == "[エラー]"
        assert settings.console.cancel_token == "/"  # default preserved

    def test_root_is_config_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "staffctl.toml").write_text("", encoding="utf-8")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = StaffSettings.from_cli()
        assert settings.root == tmp_path
        assert settings.data_path == tmp_path / "staffctl.json"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[mcp]\ntransport = "sse"\n', encoding="utf-8")
        settings = StaffSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.mcp.transport == "sse"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "staffctl.toml").write_text("[data\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            StaffSettings.from_cli(root=tmp_path)

    def test_invalid_value_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "staffctl.toml").write_text('[console]\nseparator = "=="\n', encoding="utf-8")
        with pytest.raises(ValidationError):
            StaffSettings.from_cli(root=tmp_path)


class TestOverrides:
    def test_env_var_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "staffctl.toml").write_text('[data]\nfile = "toml.json"\n', encoding="utf-8")
        monkeypatch.setenv("STAFFCTL_DATA__FILE", "env.json")
        settings = StaffSettings.from_cli(root=tmp_path)
        assert settings.data_path == tmp_path / "env.json"

    def test_data_file_flag_wins(self, tmp_path: Path) -> None:
        (tmp_path / "staffctl.toml").write_text('[data]\nfile = "toml.json"\n', encoding="utf-8")
        explicit = tmp_path / "elsewhere" / "flag.json"
        settings = StaffSettings.from_cli(root=tmp_path, data_file=str(explicit))
        assert settings.data_path == explicit

    def test_relative_data_file_flag_is_cwd_relative(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        settings = StaffSettings.from_cli(root=tmp_path / "other", data_file="mine.json")
        assert settings.data_path == tmp_path / "mine.json"

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = StaffSettings.from_cli(root=tmp_path, json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
