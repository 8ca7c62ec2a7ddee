"""Tests for the get CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from envscope.cli import cli


@pytest.mark.usefixtures("_clean_envscope_env")
class TestGetCommand:
    def test_found_in_domain(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESTEST_TIMEOUT", "30")
        result = cli_runner.invoke(cli, ["-d", "estest", "get", "TIMEOUT", "--type", "int"])
        assert result.exit_code == 0
        assert "FOUND: ESTEST_TIMEOUT" in result.output
        assert "value: 30" in result.output

    def test_json_output(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESTEST_FLAG", "1")
        result = cli_runner.invoke(
            cli, ["--json", "-d", "estest", "get", "FLAG", "--type", "bool"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["key"] == "ESTEST_FLAG"
        assert data["raw"] == "1"
        assert data["value"] is True
        assert data["origin"] == "found"
        assert data["candidates"] == ["ESTEST_FLAG"]

    def test_default_used(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ESTEST_MISSING", raising=False)
        result = cli_runner.invoke(
            cli, ["--json", "-d", "estest", "get", "MISSING", "--type", "int", "--default", "7"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["value"] == 7
        assert data["origin"] == "default"
        assert data["key"] == "ESTEST_MISSING"

    def test_unset_exits_1(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ESTEST_NONEXISTENT", raising=False)
        result = cli_runner.invoke(cli, ["get", "ESTEST_NONEXISTENT", "--no-domain-search"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "UNSET: ESTEST_NONEXISTENT" in result.stderr

    def test_invalid_default_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["get", "X", "--type", "bool", "--default", "yes"])
        assert result.exit_code == 2
        assert "not a valid bool" in result.output

    def test_oversized_int_default_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["get", "X", "--type", "int", "--default", "9" * 5000])
        assert result.exit_code == 2
        assert "not a valid int" in result.output

    def test_no_domain_search(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESTEST_RAW", "raw-value")
        monkeypatch.setenv("ESTEST_ESTEST_RAW", "domain-value")
        result = cli_runner.invoke(
            cli, ["--json", "-d", "estest", "get", "ESTEST_RAW", "--no-domain-search"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] == "raw-value"

    def test_fallback_raw_key(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ESTEST_ONLY_RAW", "raw-value")
        monkeypatch.delenv("CI_ESTEST_ONLY_RAW", raising=False)
        result = cli_runner.invoke(
            cli, ["--json", "--fallback-raw-key", "-d", "ci", "get", "ESTEST_ONLY_RAW"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["key"] == "ESTEST_ONLY_RAW"
        assert data["candidates"] == ["CI_ESTEST_ONLY_RAW", "ESTEST_ONLY_RAW"]

    def test_domains_from_env(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVSCOPE_DOMAINS", '["estest"]')
        monkeypatch.setenv("ESTEST_NAME", "from-env-domain")
        result = cli_runner.invoke(cli, ["--json", "get", "NAME"])
        assert result.exit_code == 0
        assert json.loads(result.output)["value"] == "from-env-domain"

    def test_verbose_logs_resolution(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ESTEST_LOGGED", "1")
        result = cli_runner.invoke(
            cli, ["-v", "--log-json", "-d", "estest", "get", "LOGGED", "--type", "bool"]
        )
        assert result.exit_code == 0
        assert "env.resolved" in result.stderr
        assert "FOUND: ESTEST_LOGGED" in result.stdout

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["get", "--examples"])
        assert result.exit_code == 0
        assert "envscope get BUILD_TIMEOUT" in result.output
