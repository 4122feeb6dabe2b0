"""BaseService — abstract foundation for taskctl services.

Every service receives a :class:`TaskRepository` at construction time.
Services own the load → mutate → save cycle for each operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskctl.domain.errors import NotFoundError

if TYPE_CHECKING:
    from taskctl.domain.task import Task
    from taskctl.infrastructure.store import TaskRepository


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class TaskService(BaseService):
            def add(self, description: str) -> ServiceResult:
                tasks = self._repo.load()
                ...
                self._repo.save(tasks)
    """

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task:
        """Return the task with *task_id* or raise NotFoundError."""
        for task in tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(f"task {task_id} not found")
