"""Network collaborators: interface discovery, WHOIS, and reputation lookup.

All calls are blocking and bounded by the configured timeout. Failures
surface as :class:`EnvironmentFailure`; nothing here retries.
"""

from __future__ import annotations

import logging
import socket

import requests

from mercyctl.infrastructure.capabilities import EnvironmentFailure

logger = logging.getLogger(__name__)

WHOIS_PORT = 43
_RECV_CHUNK = 4096


class SocketNetworkLookup:
    """:class:`NetworkLookup` over raw sockets and an HTTP session."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        probe_host: str = "8.8.8.8",
        probe_port: int = 80,
        whois_server: str = "whois.iana.org",
        whois_port: int = WHOIS_PORT,
        reputation_endpoint: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout
        self._probe = (probe_host, probe_port)
        self._whois = (whois_server, whois_port)
        self._reputation_endpoint = reputation_endpoint
        self._session = session or requests.Session()

    def internal_ip(self) -> str:
        """Address of the interface that routes to the probe host.

        UDP ``connect`` sends no packets; it only selects a route.
        """
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.settimeout(self._timeout)
                sock.connect(self._probe)
                address: str = sock.getsockname()[0]
        except OSError as exc:
            raise EnvironmentFailure(f"Unable to determine internal IP: {exc}") from exc
        return address

    def whois(self, domain: str) -> str:
        """Plain-text WHOIS response for *domain* (RFC 3912)."""
        logger.debug("WHOIS %s via %s:%d", domain, *self._whois)
        chunks: list[bytes] = []
        try:
            with socket.create_connection(self._whois, timeout=self._timeout) as sock:
                sock.sendall(domain.encode("idna") + b"\r\n")
                while chunk := sock.recv(_RECV_CHUNK):
                    chunks.append(chunk)
        except (OSError, UnicodeError) as exc:
            raise EnvironmentFailure(f"WHOIS lookup failed for {domain}: {exc}") from exc
        return b"".join(chunks).decode("utf-8", errors="replace").strip()

    def reputation(self, domain: str) -> str | None:
        """Classification reported by the reputation endpoint, if any.

        The endpoint is a URL template with a ``{domain}`` placeholder and
        must answer with a JSON object; its ``classification`` key is read.
        """
        if not self._reputation_endpoint:
            logger.debug("No reputation endpoint configured")
            return None
        url = self._reputation_endpoint.format(domain=domain)
        try:
            resp = self._session.get(
                url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as exc:
            raise EnvironmentFailure(f"Reputation lookup failed for {domain}: {exc}") from exc
        except ValueError as exc:
            raise EnvironmentFailure(f"Reputation endpoint returned invalid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            return None
        classification = payload.get("classification")
        if not classification:
            return None
        return str(classification).upper()
