"""``info`` capabilities: thin adapters from collaborators to transforms.

Each adapter takes the raw input string and returns a TransformResult.
Collaborator text passes through unmodified; only labels are added.
:class:`EnvironmentFailure` from a collaborator is left to propagate.
A plugin capability that raises is logged and reported as an
``ENVIRONMENT_FAILURE`` result.
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from mercyctl.domain.codecs import to_text
from mercyctl.domain.results import FILE_NOT_FOUND, TransformResult
from mercyctl.domain.types import ErrorCode
from mercyctl.domain.urls import defang, hostname_of
from mercyctl.infrastructure.archive import extract_zip, extraction_dir
from mercyctl.infrastructure.files import read_file_bytes
from mercyctl.infrastructure.mail import parse_headers

if TYPE_CHECKING:
    from mercyctl.infrastructure.capabilities import (
        Capabilities,
        NetworkLookup,
        SystemInfoProvider,
    )

Transform = Callable[[str | bytes], TransformResult]

logger = logging.getLogger(__name__)

UNKNOWN_INFO = "Unable to provide the information you requested"
UNKNOWN_SYSTEM_FIELD = "Unable to gather system information"
NO_CLASSIFICATION = "No classification available"
BAD_ARCHIVE = "Unable to extract archive"
NO_HEADERS = "No headers found"
MISSING_DOMAIN = "A domain or URL is required"

# Headers listed first (in this order) by ``email_headers``.
KEY_HEADERS = (
    "From",
    "To",
    "Cc",
    "Subject",
    "Date",
    "Message-ID",
    "Reply-To",
    "Return-Path",
    "X-Originating-IP",
)


# ---------------------------------------------------------------------------
# System metadata
# ---------------------------------------------------------------------------


def _system_fields(system: SystemInfoProvider) -> dict[str, Callable[[], str]]:
    return {
        "hostname": lambda: f"Hostname: {system.hostname()}",
        "cpu_cores": lambda: f"Number of CPU cores: {system.cpu_count()}",
        "cpu_speed": lambda: f"CPU Speed: {system.cpu_speed()} MHz",
        "os_release": lambda: f"Operating System Release Version: {system.os_release()}",
        "proc": lambda: f"Number of Processes: {system.process_count()}",
    }


def system_info(system: SystemInfoProvider, selector: str) -> TransformResult:
    """One labelled system field, or all of them for ``all``."""
    fields = _system_fields(system)
    key = selector.strip().lower()
    if key == "all":
        return TransformResult.ok("\n".join(render() for render in fields.values()))
    render = fields.get(key)
    if render is None:
        return TransformResult.unsupported(UNKNOWN_SYSTEM_FIELD)
    return TransformResult.ok(render())


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


def whois(network: NetworkLookup, target: str) -> TransformResult:
    domain = hostname_of(target)
    if not domain:
        return TransformResult.unsupported(MISSING_DOMAIN)
    return TransformResult.ok(network.whois(domain))


def reputation_status(network: NetworkLookup, target: str) -> TransformResult:
    """``MALICIOUS`` / ``SUSPICIOUS`` / ``UNKNOWN``, or the no-classification text."""
    domain = hostname_of(target)
    if not domain:
        return TransformResult.unsupported(MISSING_DOMAIN)
    classification = network.reputation(domain)
    return TransformResult.ok(classification or NO_CLASSIFICATION)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def unzip(target: str) -> TransformResult:
    archive = Path(target)
    if not archive.exists():
        return TransformResult.unsupported(FILE_NOT_FOUND, ErrorCode.RESOURCE_NOT_FOUND)
    destination = extraction_dir(archive)
    try:
        members = extract_zip(archive, destination)
    except zipfile.BadZipFile:
        return TransformResult.unsupported(BAD_ARCHIVE, ErrorCode.DECODE_FAILURE)
    return TransformResult.ok(f"Extracted {len(members)} file(s) to {destination}")


def email_headers(target: str) -> TransformResult:
    """Key headers first, then the number of ``Received`` hops."""
    path = Path(target)
    if not path.exists():
        return TransformResult.unsupported(FILE_NOT_FOUND, ErrorCode.RESOURCE_NOT_FOUND)
    headers = parse_headers(read_file_bytes(path))
    if not headers:
        return TransformResult.unsupported(NO_HEADERS, ErrorCode.DECODE_FAILURE)

    lines: list[str] = []
    for wanted in KEY_HEADERS:
        for name, value in headers:
            if name.lower() == wanted.lower():
                lines.append(f"{wanted}: {value}")
    hops = sum(1 for name, _ in headers if name.lower() == "received")
    lines.append(f"Received hops: {hops}")
    return TransformResult.ok("\n".join(lines))


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _plugin_transform(name: str, func: Callable[[str], str]) -> Transform:
    def transform(payload: str | bytes) -> TransformResult:
        try:
            value = func(to_text(payload))
        except Exception:
            logger.warning("Plugin capability %s failed", name, exc_info=True)
            return TransformResult.unsupported(UNKNOWN_INFO, ErrorCode.ENVIRONMENT_FAILURE)
        return TransformResult.ok(str(value))

    return transform


def build_info_transforms(
    capabilities: Capabilities,
    extra: Mapping[str, Callable[[str], str]] | None = None,
) -> dict[str, Transform]:
    """Protocol name -> transform for the ``info`` category.

    Built-in names take precedence over *extra* (plugin) capabilities.
    """
    system = capabilities.system
    network = capabilities.network
    builtins: dict[str, Transform] = {
        "system_info": lambda p: system_info(system, to_text(p)),
        "internal_ip": lambda _p: TransformResult.ok(network.internal_ip()),
        "defang": lambda p: TransformResult.ok(defang(to_text(p))),
        "whois": lambda p: whois(network, to_text(p)),
        "status": lambda p: reputation_status(network, to_text(p)),
        "unzip": lambda p: unzip(to_text(p)),
        "email_headers": lambda p: email_headers(to_text(p)),
    }
    transforms = {name: _plugin_transform(name, func) for name, func in (extra or {}).items()}
    transforms.update(builtins)
    return transforms
