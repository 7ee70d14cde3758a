"""Command: system, network, and file helper capabilities."""

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
  mercyctl info system_info all
  mercyctl info system_info cpu_cores
  mercyctl info internal_ip
  mercyctl info defang https://example.com
  mercyctl info whois example.com
  mercyctl info status https://example.com
  mercyctl info unzip ./bundle.zip
  mercyctl info email_headers ./suspicious.eml""",
)
@click.argument("protocol")
@click.argument("payload", required=False, default="")
@click.pass_obj
def info(app: AppContext, protocol: str, payload: str) -> None:
    """Run the PROTOCOL capability on PAYLOAD (see ``mercyctl catalog``)."""
    app.emit(app.dispatcher.run(Category.INFO, protocol, payload))
