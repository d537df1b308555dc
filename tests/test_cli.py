"""Tests for the root cashdrawer CLI."""

import pytest
from click.testing import CliRunner

from cashdrawer import __version__
from cashdrawer.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "cashdrawer" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_dir")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-cashdrawer.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["settle", "replay", "inventory", "demo"])
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", ["settle", "replay", "inventory", "demo"])
def test_examples_flag(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"cashdrawer {name}" in result.output


@pytest.mark.usefixtures("_isolated_dir")
def test_toml_output_flag_applies_without_cli_flag(cli_runner: CliRunner) -> None:
    with open("cashdrawer.toml", "w", encoding="utf-8") as fh:
        fh.write("quiet = true\n")
    result = cli_runner.invoke(cli, ["settle", "1.25", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.75€"


def test_short_help_option(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "--log-json" in result.output
