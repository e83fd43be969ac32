"""Tests for the chain CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from affixtrim.cli import cli


class TestChainCommand:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chain", "--help"])
        assert result.exit_code == 0
        assert "--step" in result.output

    def test_quoted_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "chain", '"value"', "--step", 'suffix="', "--step", 'prefix="']
        )
        assert result.exit_code == 0
        assert result.output == "value\n"

    def test_steps_in_order(self, cli_runner: CliRunner) -> None:
        forward = cli_runner.invoke(
            cli, ["-q", "chain", "abc", "-s", "prefix=ab", "-s", "suffix=bc"]
        )
        reverse = cli_runner.invoke(
            cli, ["-q", "chain", "abc", "-s", "suffix=bc", "-s", "prefix=ab"]
        )
        assert forward.output == "c\n"
        assert reverse.output == "a\n"

    def test_json_reports_steps(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "chain", "test_x.py", "-s", "prefix=test_", "-s", "suffix=.py"]
        )
        data = json.loads(result.output)
        assert data["op"] == "chain"
        assert data["data"]["steps"] == [
            {"side": "prefix", "affix": "test_"},
            {"side": "suffix", "affix": ".py"},
        ]
        assert data["data"]["items"][0]["result"] == "x"

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "chain", "-s", "prefix=test_", "-s", "suffix=.py"],
            input="test_cli.py\nconftest.py\n",
        )
        assert result.exit_code == 0
        assert result.output == "cli\nconftest\n"

    def test_step_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chain", "abc"])
        assert result.exit_code == 2

    def test_bad_step(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chain", "abc", "--step", "middle=b"])
        assert result.exit_code == 2
        assert "unknown side" in result.output

    def test_step_missing_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["chain", "abc", "--step", "prefix"])
        assert result.exit_code == 2
        assert "prefix=VALUE" in result.output
