"""Tests for the root CLI group."""

from __future__ import annotations

from click.testing import CliRunner

from refgraph import __version__
from refgraph.cli import cli


class TestCli:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "extract" in result.output
        assert "inspect" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["bogus"]).exit_code == 2

    def test_missing_config_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-c", "nope.toml", "inspect", "x.json"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output
