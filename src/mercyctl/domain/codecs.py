"""Symmetric codecs keyed by protocol name: base64 and rot13.

Decode failures are recovered into unsupported results; nothing here
raises on user input.
"""

from __future__ import annotations

import base64
import binascii
import string
from collections.abc import Callable, Mapping
from types import MappingProxyType

from mercyctl.domain.results import TransformResult
from mercyctl.domain.types import ErrorCode

UNKNOWN_DECODE = "Unable to decode message"
UNKNOWN_ENCODE = "Unable to encode message"
DECODE_ERROR = "decode error"

Codec = Callable[[str | bytes], TransformResult]


def to_bytes(payload: str | bytes) -> bytes:
    """UTF-8 bytes of *payload* (bytes pass through untouched)."""
    if isinstance(payload, bytes):
        return payload
    return payload.encode("utf-8")


def to_text(payload: str | bytes) -> str:
    """Text form of *payload*, replacing invalid UTF-8 with U+FFFD."""
    if isinstance(payload, str):
        return payload
    return payload.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# base64
# ---------------------------------------------------------------------------


def base64_decode(payload: str | bytes) -> TransformResult:
    """Decode standard, padded base64. Decoded bytes are read as lossy UTF-8."""
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return TransformResult.unsupported(DECODE_ERROR, ErrorCode.DECODE_FAILURE)
    return TransformResult.ok(raw.decode("utf-8", errors="replace"))


def base64_encode(payload: str | bytes) -> TransformResult:
    return TransformResult.ok(base64.b64encode(to_bytes(payload)).decode("ascii"))


# ---------------------------------------------------------------------------
# rot13
# ---------------------------------------------------------------------------

_ROT13 = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_lowercase[13:]
    + string.ascii_lowercase[:13]
    + string.ascii_uppercase[13:]
    + string.ascii_uppercase[:13],
)


def rot13(text: str) -> str:
    """Rotate ASCII letters by 13 within their case; everything else passes.

    Self-inverse: ``rot13(rot13(s)) == s``.

    Examples:
        >>> rot13("azazelm3dj3d")
        'nmnmryz3qw3q'
        >>> rot13("Hello, World!")
        'Uryyb, Jbeyq!'
    """
    return text.translate(_ROT13)


def rot13_transform(payload: str | bytes) -> TransformResult:
    return TransformResult.ok(rot13(to_text(payload)))


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

DECODERS: Mapping[str, Codec] = MappingProxyType(
    {
        "base64": base64_decode,
        "rot13": rot13_transform,
    }
)

ENCODERS: Mapping[str, Codec] = MappingProxyType(
    {
        "base64": base64_encode,
        "rot13": rot13_transform,
    }
)


def decode(protocol: str, payload: str | bytes) -> TransformResult:
    """Decode *payload* with the named codec."""
    codec = DECODERS.get(protocol)
    if codec is None:
        return TransformResult.unsupported(UNKNOWN_DECODE)
    return codec(payload)


def encode(protocol: str, payload: str | bytes) -> TransformResult:
    """Encode *payload* with the named codec."""
    codec = ENCODERS.get(protocol)
    if codec is None:
        return TransformResult.unsupported(UNKNOWN_ENCODE)
    return codec(payload)
