"""Tests for the update CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from taskctl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestUpdateCommand:
    def test_update_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "--help"])
        assert result.exit_code == 0
        assert "TASK_ID" in result.output

    def test_update_description(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", "Old text"])
        result = cli_runner.invoke(cli, ["--json", "update", "1", "New", "text"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["description"] == "New text"
        assert data["data"]["fields_changed"] == ["description"]
        assert data["data"]["createdAt"] != data["data"]["updatedAt"]

    def test_update_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "42", "Nope"])
        assert result.exit_code == 3
        assert "task 42 not found" in result.output

    def test_update_blank(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", "Keep"])
        result = cli_runner.invoke(cli, ["update", "1", " "])
        assert result.exit_code == 2

    @pytest.mark.parametrize("bad_id", ["0", "-3", "abc"])
    def test_invalid_id(self, cli_runner: CliRunner, bad_id: str) -> None:
        result = cli_runner.invoke(cli, ["update", bad_id, "Text"])
        assert result.exit_code == 2

    def test_non_numeric_id_message(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "abc", "Text"])
        assert "'abc' is not a task id" in result.output

    def test_zero_id_message(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "0", "Text"])
        assert "task ids start at 1, got 0" in result.output

    def test_missing_description(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["update", "1"])
        assert result.exit_code == 2
