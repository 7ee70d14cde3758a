"""Capability interfaces for the collaborators the toolkit consumes.

The dispatcher only ever sees these protocols, so tests swap in fakes
without touching the OS or the network.

INVARIANT: Collaborators raise :class:`EnvironmentFailure` when the
underlying OS or network call fails. They never exit the process.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class EnvironmentFailure(RuntimeError):
    """An OS, filesystem, or network call failed underneath a transform."""


@runtime_checkable
class SystemInfoProvider(Protocol):
    """Host metadata."""

    def hostname(self) -> str: ...

    def cpu_count(self) -> int: ...

    def cpu_speed(self) -> int:
        """Current CPU frequency in MHz."""
        ...

    def os_release(self) -> str: ...

    def process_count(self) -> int: ...


@runtime_checkable
class NetworkLookup(Protocol):
    """Blocking network lookups. Timeouts belong to the implementation."""

    def internal_ip(self) -> str: ...

    def whois(self, domain: str) -> str: ...

    def reputation(self, domain: str) -> str | None:
        """Reputation classification for *domain*, or None when absent."""
        ...


@dataclass(frozen=True)
class Capabilities:
    """Bundle of collaborators injected into the toolkit.

    ``extra`` holds named plugin capabilities (language detection,
    string identification, ...) that take the raw input and return text.
    """

    system: SystemInfoProvider
    network: NetworkLookup
    extra: Mapping[str, Callable[[str], str]] = field(default_factory=dict)
