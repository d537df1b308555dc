"""Command: replay a log of sales against one drawer."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from cashdrawer.commands._base import DrawerCommand

if TYPE_CHECKING:
    from cashdrawer.commands._context import AppContext


@click.command(
    cls=DrawerCommand,
    examples="""\
  cashdrawer replay sales.txt
  printf '3.87 12\\n10 5\\n' | cashdrawer replay
  cashdrawer --json replay sales.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def replay(app: AppContext, source: TextIO) -> None:
    """Settle every 'PRICE PAID' line of SOURCE (default: stdin) in order.

    All sales share one drawer, so earlier sales use up stock that later
    ones may need. Blank lines and '#' comments are ignored.
    """
    app.emit(app.service.replay(source))
