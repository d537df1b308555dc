"""Command: show the opening inventory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cashdrawer.commands._base import DrawerCommand

if TYPE_CHECKING:
    from cashdrawer.commands._context import AppContext


@click.command(
    cls=DrawerCommand,
    examples="""\
  cashdrawer inventory
  cashdrawer --json inventory
  cashdrawer -c till-2.toml inventory""",
)
@click.pass_obj
def inventory(app: AppContext) -> None:
    """Show every denomination in the drawer with its count."""
    app.emit(app.service.inventory())
