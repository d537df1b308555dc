"""Subcommand modules for cashdrawer.

Provides register_commands() which uses deferred imports to keep
``cashdrawer --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from cashdrawer.commands.demo import demo
    from cashdrawer.commands.inventory import inventory
    from cashdrawer.commands.replay import replay
    from cashdrawer.commands.settle import settle

    cli.add_command(settle)
    cli.add_command(replay)
    cli.add_command(inventory)
    cli.add_command(demo)
