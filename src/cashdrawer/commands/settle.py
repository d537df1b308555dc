"""Command: settle one sale."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cashdrawer.commands._base import DrawerCommand

if TYPE_CHECKING:
    from cashdrawer.commands._context import AppContext


@click.command(
    cls=DrawerCommand,
    examples="""\
  cashdrawer settle 3.87 12
  cashdrawer settle 10 5
  cashdrawer --json settle 4.99 20
  cashdrawer -q settle 1.25 2""",
)
@click.argument("price")
@click.argument("paid")
@click.pass_obj
def settle(app: AppContext, price: str, paid: str) -> None:
    """Work out the change for a sale of PRICE paid with PAID."""
    app.emit(app.service.settle(price, paid))
