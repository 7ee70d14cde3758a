"""Tests for MercySettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from mercyctl.config.settings import MercySettings


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MERCYCTL_CONFIG", raising=False)


class TestMercySettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.network.timeout == 10.0
        assert settings.network.whois_server == "whois.iana.org"
        assert settings.reputation.endpoint is None
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MercySettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_plugin_dir_relative_to_root(self, tmp_path: Path) -> None:
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.plugin_dir == tmp_path / ".mercyctl" / "plugins"


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "mercyctl.toml").write_text(
            '[network]\nwhois_server = "whois.verisign-grs.com"\n'
            '[reputation]\nendpoint = "https://rep.example/{domain}"\n'
        )
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.network.whois_server == "whois.verisign-grs.com"
        assert settings.network.whois_port == 43  # default preserved
        assert settings.reputation.endpoint == "https://rep.example/{domain}"

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "mercyctl.toml").write_text("")
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.network.probe_host == "8.8.8.8"
        assert settings.config_path == tmp_path / "mercyctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[plugins]\nenabled = false\n")
        settings = MercySettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.plugins.enabled is False
        assert settings.config_path == custom

    def test_missing_explicit_config_is_ignored(self, tmp_path: Path) -> None:
        settings = MercySettings.from_cli(config_path=str(tmp_path / "nope.toml"), root=tmp_path)
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "mercyctl.toml").write_text("[network\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            MercySettings.from_cli(root=tmp_path)

    def test_root_from_discovered_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without an explicit root, the config file's directory is used."""
        (tmp_path / "mercyctl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = MercySettings.from_cli()
        assert settings.root == tmp_path.resolve()


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = MercySettings.from_cli(
            root=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "mercyctl.toml").write_text("quiet = true\n")
        settings = MercySettings.from_cli(root=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MERCYCTL_QUIET", "true")
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MERCYCTL_NETWORK__TIMEOUT", "2.5")
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.network.timeout == 2.5

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "mercyctl.toml").write_text("[network]\nwhois_port = 4343\n")
        monkeypatch.setenv("MERCYCTL_NETWORK__WHOIS_PORT", "43")
        settings = MercySettings.from_cli(root=tmp_path)
        assert settings.network.whois_port == 43


class TestValidation:
    def test_rejects_non_positive_timeout(self, tmp_path: Path) -> None:
        (tmp_path / "mercyctl.toml").write_text("[network]\ntimeout = 0\n")
        with pytest.raises(ValidationError):
            MercySettings.from_cli(root=tmp_path)
