"""Commands: change task status (mark, mark-todo, mark-in-progress, mark-done).

Any status may follow any other. ``mark`` takes the status as an
argument; the ``mark-<status>`` shortcuts fix it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TASK_ID, TaskCommand
from taskctl.domain.task import TaskStatus

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    cls=TaskCommand,
    examples=("mark 1 in-progress", "mark 1 done", "mark 4 todo"),
)
@click.argument("task_id", type=TASK_ID)
@click.argument("status")
@click.pass_obj
def mark(app: AppContext, task_id: int, status: str) -> None:
    """Set the status of task TASK_ID (todo, in-progress, done)."""
    app.execute("mark", lambda svc: svc.set_status(task_id, status))


def _shortcut(status: TaskStatus) -> click.Command:
    """Build the ``mark-<status>`` command for *status*."""

    @click.command(
        f"mark-{status}",
        cls=TaskCommand,
        help=f"Mark task TASK_ID as {status}.",
        examples=(f"mark-{status} 1",),
    )
    @click.argument("task_id", type=TASK_ID)
    @click.pass_obj
    def _mark(app: AppContext, task_id: int) -> None:
        app.execute("mark", lambda svc: svc.set_status(task_id, status))

    return _mark


SHORTCUTS: list[click.Command] = [_shortcut(s) for s in TaskStatus]
