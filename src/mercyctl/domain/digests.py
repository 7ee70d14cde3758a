"""One-way digests keyed by protocol name. Output is lowercase hex."""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Mapping
from types import MappingProxyType

from mercyctl.domain.codecs import to_bytes
from mercyctl.domain.results import TransformResult

UNKNOWN_HASH = "Unable to hash message"

Digest = Callable[[str | bytes], TransformResult]


def _hexdigest(algorithm: str) -> Digest:
    def digest(payload: str | bytes) -> TransformResult:
        return TransformResult.ok(hashlib.new(algorithm, to_bytes(payload)).hexdigest())

    digest.__name__ = f"{algorithm}_digest"
    return digest


sha256_digest = _hexdigest("sha256")
md5_digest = _hexdigest("md5")

# ``sha2_256`` is an alias of ``sha256``.
DIGESTS: Mapping[str, Digest] = MappingProxyType(
    {
        "sha256": sha256_digest,
        "sha2_256": sha256_digest,
        "md5": md5_digest,
    }
)


def hash_message(protocol: str, payload: str | bytes) -> TransformResult:
    """Digest *payload* with the named algorithm."""
    digest = DIGESTS.get(protocol)
    if digest is None:
        return TransformResult.unsupported(UNKNOWN_HASH)
    return digest(payload)
