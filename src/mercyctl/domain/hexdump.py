"""Canonical hex/ASCII rendering of an in-memory byte buffer.

Layout matches ``hexdump -C``: an 8-digit offset, sixteen hex bytes split
into two groups of eight, the printable-ASCII column, and a closing line
holding the total length.
"""

from __future__ import annotations

ROW_WIDTH = 16
_GROUP = ROW_WIDTH // 2


def printable(byte: int) -> str:
    """ASCII character for *byte*, or ``.`` outside 0x20..0x7e."""
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def render_row(offset: int, row: bytes) -> str:
    """Render one row of at most ``ROW_WIDTH`` bytes."""
    left = " ".join(f"{b:02x}" for b in row[:_GROUP])
    right = " ".join(f"{b:02x}" for b in row[_GROUP:])
    hex_column = f"{left:<{_GROUP * 3 - 1}}  {right:<{_GROUP * 3 - 1}}"
    ascii_column = "".join(printable(b) for b in row)
    return f"{offset:08x}  {hex_column}  |{ascii_column}|"


def render_hexdump(data: bytes) -> str:
    """Render *data* as a canonical dump. An empty buffer yields the offset line only.

    Examples:
        >>> print(render_hexdump(b"Hi!"))
        00000000  48 69 21                                          |Hi!|
        00000003
    """
    lines = [
        render_row(offset, data[offset : offset + ROW_WIDTH])
        for offset in range(0, len(data), ROW_WIDTH)
    ]
    lines.append(f"{len(data):08x}")
    return "\n".join(lines)
