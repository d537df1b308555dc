"""AppContext — the till session every subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cashdrawer.config.logging import configure_logging
from cashdrawer.output.formatters import OutputSettings, format_result
from cashdrawer.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from cashdrawer.config.settings import CashDrawerSettings
    from cashdrawer.services.drawer import DrawerService
    from cashdrawer.services.result import ServiceResult


class AppContext:
    """One CLI run is one till session.

    The drawer is opened from ``[drawer] opening_counts`` the first time a
    command asks for :attr:`service`, so ``--help`` never validates the
    float. Results go out through :meth:`emit`.
    """

    def __init__(self, settings: CashDrawerSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._service: DrawerService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def service(self) -> DrawerService:
        """The DrawerService bound to this session's drawer."""
        if self._service is None:
            from cashdrawer.domain.drawer import CashDrawer
            from cashdrawer.services.drawer import DrawerService

            config = self.settings.drawer
            try:
                drawer = CashDrawer(config.opening_counts)
            except ValueError as exc:
                source = self.settings.config_path or "environment"
                raise click.ClickException(
                    f"Invalid [drawer] opening_counts ({source}): {exc}"
                ) from exc
            self._service = DrawerService(drawer, config)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result exits with status 1.

        Successes go to stdout with warnings on stderr (JSON output keeps
        them in the payload instead). Failures go to stderr.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
