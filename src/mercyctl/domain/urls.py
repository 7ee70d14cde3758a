"""URL and hostname helpers: defanging and host extraction."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# A dot that is not already wrapped as ``[.]``.
_BARE_DOT = re.compile(r"(?<!\[)\.(?!\])")


def defang(text: str) -> str:
    """Replace every bare ``.`` with ``[.]``. Already defanged dots are kept.

    Examples:
        >>> defang("https://example.com")
        'https://example[.]com'
        >>> defang("https://example[.]com")
        'https://example[.]com'
    """
    return _BARE_DOT.sub("[.]", text)


def refang(text: str) -> str:
    """Inverse of :func:`defang`."""
    return text.replace("[.]", ".")


def hostname_of(value: str) -> str:
    """Extract the host from a URL, or return a bare host unchanged.

    Unparseable URLs yield an empty string.

    Examples:
        >>> hostname_of("https://Example.com/path")
        'example.com'
        >>> hostname_of("example.com")
        'example.com'
    """
    value = refang(value.strip())
    if "://" in value:
        try:
            return (urlsplit(value).hostname or "").lower()
        except ValueError:
            return ""
    return value.split("/", 1)[0].lower()
