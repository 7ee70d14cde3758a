"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mercyctl.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """[network] section."""

    model_config = {"frozen": True}

    timeout: float = Field(default=10.0, gt=0)
    probe_host: str = "8.8.8.8"
    probe_port: int = 80
    whois_server: str = "whois.iana.org"
    whois_port: int = 43


class ReputationConfig(BaseModel):
    """[reputation] section.

    ``endpoint`` is a URL template with a ``{domain}`` placeholder.
    Lookups report no classification while it is unset.
    """

    model_config = {"frozen": True}

    endpoint: str | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".mercyctl/plugins"
