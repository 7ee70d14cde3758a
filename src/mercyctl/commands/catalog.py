"""Command: list every method, alias, and protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mercyctl.commands._base import MercyCommand

if TYPE_CHECKING:
    from mercyctl.commands._context import AppContext


@click.command(
    cls=MercyCommand,
    examples="""\
  mercyctl catalog
  mercyctl --json catalog""",
)
@click.pass_obj
def catalog(app: AppContext) -> None:
    """Show available methods and protocols, plugin capabilities included."""
    app.emit(app.dispatcher.catalog())
