"""DrawerCommand — click.Command with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-paste invocations
and exits before any argument is parsed or the drawer is opened.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    assert isinstance(command, DrawerCommand)
    click.secho(f"{ctx.command_path} examples:", bold=True)
    click.echo(command.examples)
    ctx.exit()


class DrawerCommand(click.Command):
    """Every cashdrawer subcommand; *examples* defaults to the bare call."""

    def __init__(self, *args: Any, examples: str = "", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples or f"  cashdrawer {self.name}"
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=_print_examples,
                help="Show example invocations and exit.",
            )
        )
