"""TaskService — add, update, mark, delete, get, and list tasks.

Each operation runs one load → mutate → save cycle against the
repository. Domain errors raised along the way propagate unmodified.
"""

from __future__ import annotations

import logging

from taskctl.domain.task import Task, new_task, parse_status
from taskctl.services.base import BaseService
from taskctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


def next_id(tasks: list[Task]) -> int:
    """One past the highest id in use (1 for an empty list)."""
    return max((t.id for t in tasks), default=0) + 1


class TaskService(BaseService):
    """Task use cases. Knows nothing about files or JSON."""

    def add(self, description: str) -> ServiceResult:
        tasks = self._repo.load()
        task = new_task(next_id(tasks), description)
        tasks.append(task)
        self._repo.save(tasks)
        logger.info("Added task %d", task.id)
        return ServiceResult(ok=True, op="add", data=task.to_record())

    def update(self, task_id: int, description: str) -> ServiceResult:
        tasks = self._repo.load()
        task = self._find(tasks, task_id)
        task.update_description(description)
        self._repo.save(tasks)
        logger.info("Updated task %d", task_id)
        return ServiceResult(
            ok=True,
            op="update",
            data={**task.to_record(), "fields_changed": ["description"]},
        )

    def set_status(self, task_id: int, status: str) -> ServiceResult:
        """Move a task to *status*. No transition graph applies."""
        target = parse_status(status)
        tasks = self._repo.load()
        task = self._find(tasks, task_id)
        previous = task.status
        task.set_status(target)
        self._repo.save(tasks)
        logger.info("Marked task %d %s -> %s", task_id, previous, target)
        return ServiceResult(
            ok=True,
            op="mark",
            data={**task.to_record(), "previous_status": previous},
        )

    def delete(self, task_id: int) -> ServiceResult:
        tasks = self._repo.load()
        task = self._find(tasks, task_id)
        tasks.remove(task)
        self._repo.save(tasks)
        logger.info("Deleted task %d", task_id)
        return ServiceResult(ok=True, op="delete", data={"id": task_id})

    def get(self, task_id: int) -> ServiceResult:
        task = self._find(self._repo.load(), task_id)
        return ServiceResult(ok=True, op="get", data=task.to_record())

    def list(self, status: str | None = None) -> ServiceResult:
        """All tasks sorted by id, optionally only those in *status*."""
        wanted = parse_status(status).value if status is not None else None
        tasks = sorted(self._repo.load(), key=lambda t: t.id)
        if wanted is not None:
            tasks = [t for t in tasks if t.status == wanted]
        items = [t.to_record() for t in tasks]
        return ServiceResult(
            ok=True,
            op="list",
            data={"count": len(items), "status": wanted, "items": items},
        )
