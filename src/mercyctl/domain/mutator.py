"""Bit-flip domain permutations (bitsquatting candidates).

Every byte of the seed has each of its eight bits flipped in turn. A flip
survives when it lands on an ASCII letter, digit or hyphen and changes more
than the letter case. Surviving strings that end with a known extension are
emitted as domains.

INVARIANT: Enumeration order is byte position ascending, then bit 0..7
ascending. Calling again with the same seed replays the same sequence.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

# Checked in this order; the first match wins.
EXTENSIONS: tuple[str, ...] = (
    ".com",
    ".io",
    ".co",
    ".ai",
    ".moe",
    ".org",
    ".edu",
    ".net",
    ".biz",
    ".ru",
    ".uk",
    ".au",
    ".de",
    ".in",
)

_HYPHEN = ord("-")


@dataclass(frozen=True)
class DomainCandidate:
    """A single mutated string and the extension it ended with, if any."""

    text: str
    matched_extension: str | None = None

    @property
    def is_domain(self) -> bool:
        return self.matched_extension is not None


def match_extension(text: str) -> str | None:
    """Return the first known extension *text* ends with, else None."""
    for extension in EXTENSIONS:
        if text.endswith(extension):
            return extension
    return None


def _accepts(original: int, flipped: int) -> bool:
    if not (flipped == _HYPHEN or (flipped < 0x80 and chr(flipped).isalnum())):
        return False
    return bytes([flipped]).lower() != bytes([original]).lower()


def bit_flips(seed: str) -> Iterator[DomainCandidate]:
    """Yield every accepted single-bit flip of *seed*, matched or not.

    Non-ASCII source bytes are skipped so every candidate stays valid UTF-8.
    """
    data = seed.encode("utf-8")
    for position, original in enumerate(data):
        if original >= 0x80:
            continue
        for bit in range(8):
            flipped = original ^ (1 << bit)
            if not _accepts(original, flipped):
                continue
            mutated = data[:position] + bytes([flipped]) + data[position + 1 :]
            text = mutated.decode("utf-8")
            yield DomainCandidate(text=text, matched_extension=match_extension(text))


def mutate_domain(seed: str) -> Iterator[DomainCandidate]:
    """Yield the flips of *seed* that still end with a known extension.

    Examples:
        >>> [c.text for c in mutate_domain("a.io")]
        ['c.io', 'e.io', 'i.io', 'q.io', 'a.in']
        >>> list(mutate_domain("aaa"))
        []
    """
    for candidate in bit_flips(seed):
        if candidate.is_domain:
            yield candidate
