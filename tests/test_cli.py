"""Tests for the root envscope CLI."""

from __future__ import annotations

from click.testing import CliRunner

from envscope import __version__
from envscope.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "envscope" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "envscope -d ci get" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["--json", "-v", "--log-json", "-d", "ci", "--fallback-raw-key", "--version"]
    )
    assert result.exit_code == 0
