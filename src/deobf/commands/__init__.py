"""Subcommand modules for deobf.

register_commands() uses deferred imports to keep ``deobf --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the lookup group and standalone commands on the root CLI group."""
    from deobf.commands.builders import builders
    from deobf.commands.dump import dump
    from deobf.commands.lookup import lookup

    cli.add_command(lookup)
    cli.add_command(dump)
    cli.add_command(builders)
