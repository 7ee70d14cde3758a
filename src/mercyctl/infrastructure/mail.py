"""RFC 5322 header parsing for saved messages (``.eml``)."""

from __future__ import annotations

from email import policy
from email.parser import BytesParser


def parse_headers(raw: bytes) -> list[tuple[str, str]]:
    """Parse the header block of a raw message into ``(name, value)`` pairs.

    Order and repeated headers (``Received``) are preserved.
    """
    message = BytesParser(policy=policy.default).parsebytes(raw, headersonly=True)
    return [(name, str(value)) for name, value in message.items()]
