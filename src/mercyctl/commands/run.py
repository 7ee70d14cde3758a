"""Command: dispatch a raw method/protocol/input triple."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mercyctl.commands._base import MercyCommand

if TYPE_CHECKING:
    from mercyctl.commands._context import AppContext


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl run -m decode -p base64 -i bWVyY3kgaXMgcmVhbGx5IGNvb2w=
  mercyctl run -m hash -p sha2_256 -i azazelm3dj3d
  mercyctl run -m hex -p hex_dump -i ./firmware.bin
  mercyctl run -m sys -p system_info -i all
  mercyctl run -m mal -p status -i 'example.com'""",
)
@click.option("-m", "--method", default="", help="Method, e.g. decode, hash, hex, mutate, info.")
@click.option("-p", "--protocol", default="", help="Protocol within the method, e.g. base64.")
@click.option("-i", "--input", "payload", default="", help="Input string or file path.")
@click.pass_obj
def run(app: AppContext, method: str, protocol: str, payload: str) -> None:
    """Run any method/protocol pair on an input."""
    app.emit(app.dispatcher.run(method, protocol, payload))
