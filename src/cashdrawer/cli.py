"""``cashdrawer`` entry point: global output flags, then one subcommand."""

from __future__ import annotations

import click

from cashdrawer import __version__
from cashdrawer.commands import register_commands
from cashdrawer.commands._context import AppContext
from cashdrawer.config.settings import CashDrawerSettings

_OUTPUT_FLAGS = ("json_output", "quiet", "verbose", "log_json")


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="cashdrawer")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the key figure.")
@click.option("-v", "--verbose", is_flag=True, help="Add detail, timings and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Read this TOML file instead of discovering cashdrawer.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """cashdrawer — work out change from a till drawer with limited coins."""
    # Unset flags are left out so TOML and env values can still turn them on.
    chosen = {name: True for name in _OUTPUT_FLAGS if flags.get(name)}
    ctx.obj = AppContext(CashDrawerSettings.from_cli(config_path=config_path, **chosen))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
