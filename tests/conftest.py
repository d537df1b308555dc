"""Shared pytest fixtures for cashdrawer tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from cashdrawer.domain.drawer import CashDrawer
from cashdrawer.services.drawer import DrawerService
from cashdrawer.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` CLI runs switch telemetry on for the whole context."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CASHDRAWER_* environment out of the tests."""
    for name in (
        "CASHDRAWER_CONFIG",
        "CASHDRAWER_JSON_OUTPUT",
        "CASHDRAWER_QUIET",
        "CASHDRAWER_VERBOSE",
        "CASHDRAWER_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI runs reconfigure the root logger against CliRunner's streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = logging.getLogger("cashdrawer").level
    yield
    root.handlers[:] = handlers
    logging.getLogger("cashdrawer").setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def drawer() -> CashDrawer:
    """A drawer holding the standard opening float."""
    return CashDrawer()


@pytest.fixture
def service(drawer: CashDrawer) -> DrawerService:
    return DrawerService(drawer)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no cashdrawer.toml is discovered."""
    monkeypatch.chdir(tmp_path)


def only(**counts: int) -> dict[str, int]:
    """Opening counts with every denomination empty except *counts*.

    Keys are written with ``_`` for the decimal point: ``only(d0_5=3)``.
    """
    from cashdrawer.domain.denominations import EURO_DENOMINATIONS
    from cashdrawer.domain.money import format_denomination

    opening = {format_denomination(cents): 0 for cents in EURO_DENOMINATIONS}
    for key, count in counts.items():
        opening[key.removeprefix("d").replace("_", ".")] = count
    return opening


@pytest.fixture
def make_drawer():
    """Factory for drawers holding only the given denominations."""

    def _make(**counts: int) -> CashDrawer:
        return CashDrawer(only(**counts))

    return _make
