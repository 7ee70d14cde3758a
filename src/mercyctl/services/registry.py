"""The dispatch registry: category -> protocol name -> transform.

Every level is a ``MappingProxyType`` and read-only once built, so
concurrent dispatches need no coordination. The pure tables are module
constants; the ``info`` table depends on collaborators and plugins and is
built per :class:`Dispatcher`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from mercyctl.domain.codecs import DECODERS, ENCODERS, UNKNOWN_DECODE, UNKNOWN_ENCODE, to_text
from mercyctl.domain.digests import DIGESTS, UNKNOWN_HASH
from mercyctl.domain.hexdump import render_hexdump
from mercyctl.domain.mutator import mutate_domain
from mercyctl.domain.results import FILE_NOT_FOUND, TransformResult
from mercyctl.domain.types import Category, ErrorCode
from mercyctl.infrastructure.files import read_file_bytes
from mercyctl.services.collaborators import UNKNOWN_INFO, build_info_transforms

if TYPE_CHECKING:
    from mercyctl.infrastructure.capabilities import Capabilities

Transform = Callable[[str | bytes], TransformResult]
Registry = Mapping[Category, Mapping[str, Transform]]

UNKNOWN_HEX = "Unable to provide hexadecimal dump for file specified"
UNKNOWN_MUTATE = "Unable to generate domain permutations"

# Sentinel returned when a category is known but the protocol is not.
UNKNOWN_PROTOCOL: Mapping[Category, str] = MappingProxyType(
    {
        Category.DECODE: UNKNOWN_DECODE,
        Category.ENCODE: UNKNOWN_ENCODE,
        Category.HASH: UNKNOWN_HASH,
        Category.HEXDUMP: UNKNOWN_HEX,
        Category.MUTATE: UNKNOWN_MUTATE,
        Category.INFO: UNKNOWN_INFO,
    }
)


def hex_dump_file(payload: str | bytes) -> TransformResult:
    """Canonical dump of the file at *payload*.

    Existence is checked before the file is opened. A read that fails
    after the check raises :class:`EnvironmentFailure`.
    """
    path = Path(to_text(payload))
    if not path.exists():
        return TransformResult.unsupported(FILE_NOT_FOUND, ErrorCode.RESOURCE_NOT_FOUND)
    return TransformResult.ok(render_hexdump(read_file_bytes(path)))


def domain_gen(payload: str | bytes) -> TransformResult:
    """Newline-delimited bit-flip domains for the seed (possibly empty)."""
    return TransformResult.ok("\n".join(c.text for c in mutate_domain(to_text(payload))))


# Categories whose transforms need no collaborators.
STATIC_TABLES: Registry = MappingProxyType(
    {
        Category.DECODE: DECODERS,
        Category.ENCODE: ENCODERS,
        Category.HASH: DIGESTS,
        Category.HEXDUMP: MappingProxyType({"hex_dump": hex_dump_file}),
        Category.MUTATE: MappingProxyType({"domain_gen": domain_gen}),
    }
)


def build_info_table(
    capabilities: Capabilities,
    extra: Mapping[str, Callable[[str], str]] | None = None,
) -> Mapping[str, Transform]:
    return MappingProxyType(build_info_transforms(capabilities, extra))
