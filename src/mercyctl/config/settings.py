"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:  CLI flags passed by Click
  2. Env vars:     ``MERCYCTL_*`` prefix, ``__`` for nested sections
  3. TOML file:    ``mercyctl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from mercyctl.config.discovery import find_config
from mercyctl.config.models import NetworkConfig, PluginsConfig, ReputationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``mercyctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class MercySettings(BaseSettings):
    """Settings for the whole CLI, frozen after construction.

    Attributes:
        root: Directory holding ``mercyctl.toml`` (or CWD if none was found).
            Relative paths in the config, such as the local plugin
            directory, resolve against it.
        config_path: The TOML file in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MERCYCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    reputation: ReputationConfig = Field(default_factory=ReputationConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def plugin_dir(self) -> Path:
        return self.root / self.plugins.local_dir

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> MercySettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* wins over walk-up discovery from *root*
        (or the CWD). CLI flags are the highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
