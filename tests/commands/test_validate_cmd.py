"""Tests for the validate CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from bemlint.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestValidateCommand:
    def test_clean_names_exit_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "c-card__title--large", "o-media"])
        assert result.exit_code == 0
        assert "c-card__title--large" in result.output
        assert "2 classes, 0 errors, 0 warnings" in result.output

    def test_failing_name_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "u-hidden--sm"])
        assert result.exit_code == 1
        assert "namespace forbids descendants/modifiers" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "js-main-nav", "--variant", "six-namespace"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "validate"
        entry = data["data"]["results"][0]
        assert entry["namespace"] == "jsHook"
        assert entry["block"] == "main-nav"

    def test_advisory_is_warning_unless_strict(self, cli_runner: CliRunner) -> None:
        relaxed = cli_runner.invoke(cli, ["validate", "navbar"])
        strict = cli_runner.invoke(cli, ["validate", "--strict", "navbar"])
        assert relaxed.exit_code == 0
        assert strict.exit_code == 1

    def test_strict_from_env(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEMLINT_LINT__STRICT", "true")
        result = cli_runner.invoke(cli, ["validate", "navbar"])
        assert result.exit_code == 1

    def test_no_strict_overrides_config(self, cli_runner: CliRunner) -> None:
        with open("bemlint.toml", "w", encoding="utf-8") as fh:
            fh.write("[lint]\nstrict = true\n")
        result = cli_runner.invoke(cli, ["validate", "--no-strict", "navbar"])
        assert result.exit_code == 0

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "-"], input="c-card\nu-x--y o-box\n"
        )
        assert result.exit_code == 1
        names = [e["name"] for e in json.loads(result.stdout)["data"]["results"]]
        assert names == ["c-card", "u-x--y", "o-box"]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", "c-card", "c-card--a--b"])
        assert result.exit_code == 1
        assert result.stdout.strip() == "c-card--a--b: multiple modifier delimiters"

    def test_no_names_exits_two(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 2
        assert result.stdout == ""
        assert "No class names given" in result.output

    def test_unknown_variant_exits_two(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "--variant", "atomic", "c-card"])
        assert result.exit_code == 2
        assert result.stdout == ""
        assert "CONFIG_ERROR" in result.output

    def test_variant_name_with_markup_exits_two(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--variant", "[/x]", "c-card"])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "[/x]" in result.output

    def test_stdin_marker_among_names(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "c-card", "-", "u-hidden"], input="o-box is-open\n"
        )
        assert result.exit_code == 0
        names = [e["name"] for e in json.loads(result.stdout)["data"]["results"]]
        assert names == ["c-card", "o-box", "is-open", "u-hidden"]

    def test_stdin_read_once(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "-", "-"], input="c-card\n")
        names = [e["name"] for e in json.loads(result.stdout)["data"]["results"]]
        assert names == ["c-card"]
