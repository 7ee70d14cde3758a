"""Toolkit: the single dependency injected into every service.

Owns the collaborator capabilities (system metadata, network lookups) and
the plugin manager. Both are created lazily so ``--help`` and pure codec
calls never touch psutil, sockets, or plugin discovery.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mercyctl.infrastructure.capabilities import Capabilities

if TYPE_CHECKING:
    from collections.abc import Callable

    from mercyctl.config.settings import MercySettings
    from mercyctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def default_capabilities(settings: MercySettings) -> Capabilities:
    """Build the local-machine collaborators from *settings*."""
    from mercyctl.infrastructure.network import SocketNetworkLookup
    from mercyctl.infrastructure.system import PsutilSystemInfo

    net = settings.network
    return Capabilities(
        system=PsutilSystemInfo(),
        network=SocketNetworkLookup(
            timeout=net.timeout,
            probe_host=net.probe_host,
            probe_port=net.probe_port,
            whois_server=net.whois_server,
            whois_port=net.whois_port,
            reputation_endpoint=settings.reputation.endpoint,
        ),
    )


class Toolkit:
    """Container for settings, collaborators, and plugins.

    Pass *capabilities* to replace the local-machine collaborators
    (tests inject fakes this way).
    """

    def __init__(
        self,
        settings: MercySettings,
        *,
        capabilities: Capabilities | None = None,
    ) -> None:
        self.settings = settings
        self._capabilities = capabilities
        self._plugins: PluginManager | None = None

    @property
    def capabilities(self) -> Capabilities:
        if self._capabilities is None:
            self._capabilities = default_capabilities(self.settings)
        return self._capabilities

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager, discovered and loaded on first access."""
        if self._plugins is None:
            from mercyctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                names = self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
                logger.debug("Loaded plugins: %s", names)
        return self._plugins

    def plugin_capabilities(self) -> dict[str, Callable[[str], str]]:
        """Injected extras merged over plugin-provided capabilities."""
        merged: dict[str, Callable[[str], str]] = dict(self.plugins.collect_capabilities())
        merged.update(self.capabilities.extra)
        return merged
