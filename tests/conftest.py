"""Shared pytest fixtures and fakes for mercyctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from mercyctl.config.settings import MercySettings
from mercyctl.infrastructure.capabilities import Capabilities, EnvironmentFailure
from mercyctl.infrastructure.toolkit import Toolkit
from mercyctl.services.dispatch import Dispatcher
from mercyctl.services.telemetry import disable_telemetry


class FakeSystemInfo:
    """Deterministic SystemInfoProvider."""

    def hostname(self) -> str:
        return "test-host"

    def cpu_count(self) -> int:
        return 8

    def cpu_speed(self) -> int:
        return 2400

    def os_release(self) -> str:
        return "6.1.0-test"

    def process_count(self) -> int:
        return 123


class FakeNetwork:
    """NetworkLookup that records calls and answers from a table."""

    def __init__(self, classifications: dict[str, str] | None = None) -> None:
        self.classifications = classifications or {}
        self.whois_calls: list[str] = []

    def internal_ip(self) -> str:
        return "10.0.0.5"

    def whois(self, domain: str) -> str:
        self.whois_calls.append(domain)
        return f"Domain Name: {domain.upper()}"

    def reputation(self, domain: str) -> str | None:
        return self.classifications.get(domain)


class BrokenNetwork(FakeNetwork):
    """NetworkLookup whose every call fails at the OS level."""

    def internal_ip(self) -> str:
        raise EnvironmentFailure("network unreachable")

    def whois(self, domain: str) -> str:
        raise EnvironmentFailure("connection refused")

    def reputation(self, domain: str) -> str | None:
        raise EnvironmentFailure("timed out")


@pytest.fixture(autouse=True)
def _telemetry_off() -> Iterator[None]:
    """Telemetry is a context var; keep tests independent of each other."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_network() -> FakeNetwork:
    return FakeNetwork({"evil.example": "MALICIOUS", "odd.example": "SUSPICIOUS"})


@pytest.fixture
def capabilities(fake_network: FakeNetwork) -> Capabilities:
    return Capabilities(system=FakeSystemInfo(), network=fake_network)


@pytest.fixture
def settings(tmp_path: Path) -> MercySettings:
    return MercySettings.from_cli(root=tmp_path)


@pytest.fixture
def toolkit(settings: MercySettings, capabilities: Capabilities) -> Toolkit:
    return Toolkit(settings, capabilities=capabilities)


@pytest.fixture
def dispatcher(toolkit: Toolkit) -> Dispatcher:
    return Dispatcher(toolkit)


@pytest.fixture
def _isolated(
    tmp_path: Path,
    capabilities: Capabilities,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Run the CLI from a temp dir with fake collaborators.

    Use via ``@pytest.mark.usefixtures("_isolated")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MERCYCTL_CONFIG", raising=False)
    monkeypatch.setattr(
        "mercyctl.infrastructure.toolkit.default_capabilities",
        lambda _settings: capabilities,
    )


@pytest.fixture
def broken_dispatcher(settings: MercySettings) -> Dispatcher:
    """Dispatcher whose network collaborator always fails."""
    caps = Capabilities(system=FakeSystemInfo(), network=BrokenNetwork())
    return Dispatcher(Toolkit(settings, capabilities=caps))
