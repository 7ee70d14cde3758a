"""Subcommand modules for mercyctl.

register_commands() imports lazily so ``mercyctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from mercyctl.commands.catalog import catalog
    from mercyctl.commands.info import info
    from mercyctl.commands.run import run
    from mercyctl.commands.transform import decode, encode, hash_cmd, hexdump, mutate

    cli.add_command(run)
    cli.add_command(decode)
    cli.add_command(encode)
    cli.add_command(hash_cmd)
    cli.add_command(hexdump)
    cli.add_command(mutate)
    cli.add_command(info)
    cli.add_command(catalog)
