"""Command: delete a task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TASK_ID, TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    cls=TaskCommand,
    examples=("delete 2", "--json delete 5"),
)
@click.argument("task_id", type=TASK_ID)
@click.pass_obj
def delete(app: AppContext, task_id: int) -> None:
    """Delete task TASK_ID."""
    app.execute("delete", lambda svc: svc.delete(task_id))
