"""Tests for the list and show CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from taskctl.cli import cli


@pytest.fixture
def _three_tasks(cli_runner: CliRunner, _isolated_project: None) -> None:
    for text in ("Alpha", "Beta", "Gamma"):
        cli_runner.invoke(cli, ["add", text])
    cli_runner.invoke(cli, ["mark-done", "1"])
    cli_runner.invoke(cli, ["mark-in-progress", "2"])


@pytest.mark.usefixtures("_isolated_project")
class TestListCommand:
    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "No tasks." in result.output

    @pytest.mark.usefixtures("_three_tasks")
    def test_list_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["count"] == 3
        assert [item["id"] for item in data["items"]] == [1, 2, 3]

    @pytest.mark.usefixtures("_three_tasks")
    @pytest.mark.parametrize(
        ("status", "ids"),
        [("done", [1]), ("in-progress", [2]), ("todo", [3])],
    )
    def test_list_filtered(self, cli_runner: CliRunner, status: str, ids: list[int]) -> None:
        result = cli_runner.invoke(cli, ["--json", "list", status])
        data = json.loads(result.output)["data"]
        assert data["status"] == status
        assert [item["id"] for item in data["items"]] == ids

    @pytest.mark.usefixtures("_three_tasks")
    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Gamma" in result.output
        assert "3 tasks" in result.output

    @pytest.mark.usefixtures("_three_tasks")
    def test_quiet_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.output.split() == ["1", "2", "3"]

    def test_invalid_status(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list", "Done"])
        assert result.exit_code == 2
        assert "invalid status" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", "Write report"])
        result = cli_runner.invoke(cli, ["show", "1"])
        assert result.exit_code == 0
        assert "#1" in result.output
        assert "Write report" in result.output

    def test_show_json(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["add", "Write report"])
        data = json.loads(cli_runner.invoke(cli, ["--json", "show", "1"]).output)
        assert data["op"] == "get"
        assert set(data["data"]) == {"id", "description", "status", "createdAt", "updatedAt"}

    def test_show_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "7"])
        assert result.exit_code == 3
        assert "ERROR" in result.output
