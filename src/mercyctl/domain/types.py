"""Dispatch categories and the error taxonomy.

Categories form a closed set; protocol names inside a category are looked
up at dispatch time and are never validated earlier.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class Category(StrEnum):
    """Top-level dispatch method."""

    DECODE = "decode"
    ENCODE = "encode"
    HASH = "hash"
    HEXDUMP = "hexdump"
    MUTATE = "mutate"
    INFO = "info"

    @classmethod
    def parse(cls, value: str) -> Category | None:
        """Resolve a method name (or one of its CLI aliases) to a Category.

        Returns None for anything unrecognised.

        Examples:
            >>> Category.parse("hex")
            <Category.HEXDUMP: 'hexdump'>
            >>> Category.parse("who")
            <Category.INFO: 'info'>
            >>> Category.parse("bogus") is None
            True
        """
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return CATEGORY_ALIASES.get(key)


# Short method spellings accepted by ``run -m``.
CATEGORY_ALIASES: Mapping[str, Category] = MappingProxyType(
    {
        "hex": Category.HEXDUMP,
        "sys": Category.INFO,
        "ip": Category.INFO,
        "d": Category.INFO,
        "who": Category.INFO,
        "mal": Category.INFO,
        "id": Category.INFO,
    }
)


class ErrorCode(StrEnum):
    """Handled failure kinds carried by unsupported results."""

    UNSUPPORTED_PROTOCOL = "UNSUPPORTED_PROTOCOL"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    DECODE_FAILURE = "DECODE_FAILURE"
    ENVIRONMENT_FAILURE = "ENVIRONMENT_FAILURE"
