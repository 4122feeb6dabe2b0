"""Shared pytest fixtures and test helpers for taskctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from taskctl.domain.task import Task
from taskctl.infrastructure.store import JsonTaskStore


class InMemoryTaskStore:
    """TaskRepository fake that keeps copies, like a real store would."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: list[Task] = [t.model_copy() for t in tasks or []]
        self.saves = 0

    def load(self) -> list[Task]:
        return [t.model_copy() for t in self.tasks]

    def save(self, tasks: list[Task]) -> None:
        self.tasks = [t.model_copy() for t in tasks]
        self.saves += 1


def make_task(task_id: int, description: str = "A", status: str = "todo") -> Task:
    """Build a task with fixed timestamps."""
    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at="2024-01-01T00:00:00+00:00",
        updated_at="2024-01-01T00:00:00+00:00",
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TASKCTL_* environment out of tests."""
    for name in (
        "TASKCTL_CONFIG",
        "TASKCTL_STORAGE__FILE",
        "TASKCTL_STORAGE__INDENT",
        "TASKCTL_JSON_OUTPUT",
        "TASKCTL_QUIET",
        "TASKCTL_VERBOSE",
        "TASKCTL_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def tasks_path(tmp_path: Path) -> Path:
    """Path of a (not yet created) tasks file in a temp directory."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_path: Path) -> JsonTaskStore:
    """JSON store on a temp file."""
    return JsonTaskStore(tasks_path)


@pytest.fixture
def memory_store() -> InMemoryTaskStore:
    """Empty in-memory store."""
    return InMemoryTaskStore()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated tasks file.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes. The tasks file lands at ``tmp_path / "tasks.json"``.
    """
    monkeypatch.chdir(tmp_path)
