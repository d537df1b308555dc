"""Command: run the sample sale."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cashdrawer.commands._base import DrawerCommand

if TYPE_CHECKING:
    from cashdrawer.commands._context import AppContext

DEMO_PRICE = "3.87"
DEMO_PAID = "12"


@click.command(
    cls=DrawerCommand,
    examples="""\
  cashdrawer demo
  cashdrawer --json demo
  cashdrawer -c till-2.toml demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Settle a 3.87 sale paid with 12 on a fresh drawer."""
    app.emit(app.service.settle(DEMO_PRICE, DEMO_PAID))
