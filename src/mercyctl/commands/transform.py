"""Commands: decode, encode, hash, hexdump, and mutate."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mercyctl.commands._base import MercyCommand
from mercyctl.domain.types import Category

if TYPE_CHECKING:
    from mercyctl.commands._context import AppContext


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl decode base64 YXphemVsbTNkajNk
  mercyctl decode rot13 nmnmryz3qw3q
  mercyctl -q decode base64 bWVyY3k=""",
)
@click.argument("protocol")
@click.argument("text")
@click.pass_obj
def decode(app: AppContext, protocol: str, text: str) -> None:
    """Decode TEXT with PROTOCOL (base64, rot13)."""
    app.emit(app.dispatcher.run(Category.DECODE, protocol, text))


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl encode base64 azazelm3dj3d
  mercyctl encode rot13 'Hello, World'""",
)
@click.argument("protocol")
@click.argument("text")
@click.pass_obj
def encode(app: AppContext, protocol: str, text: str) -> None:
    """Encode TEXT with PROTOCOL (base64, rot13)."""
    app.emit(app.dispatcher.run(Category.ENCODE, protocol, text))


@click.command(
    "hash",
    cls=MercyCommand,
    examples="""\
  mercyctl hash sha256 azazelm3dj3d
  mercyctl hash md5 azazelm3dj3d
  mercyctl --json hash sha2_256 azazelm3dj3d""",
)
@click.argument("protocol")
@click.argument("text")
@click.pass_obj
def hash_cmd(app: AppContext, protocol: str, text: str) -> None:
    """Digest TEXT with PROTOCOL (sha256, md5) as lowercase hex."""
    app.emit(app.dispatcher.run(Category.HASH, protocol, text))


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl hexdump ./sample.bin
  mercyctl -q hexdump /etc/hostname""",
)
@click.argument("path")
@click.option("--protocol", default="hex_dump", show_default=True, help="Dump format.")
@click.pass_obj
def hexdump(app: AppContext, path: str, protocol: str) -> None:
    """Print a canonical hex/ASCII dump of the file at PATH."""
    app.emit(app.dispatcher.run(Category.HEXDUMP, protocol, path))


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl mutate example.com
  mercyctl -q mutate google.com > candidates.txt""",
)
@click.argument("seed")
@click.option("--protocol", default="domain_gen", show_default=True, help="Permutation strategy.")
@click.pass_obj
def mutate(app: AppContext, seed: str, protocol: str) -> None:
    """List single-bit-flip domains of SEED that keep a known extension."""
    app.emit(app.dispatcher.run(Category.MUTATE, protocol, seed))
