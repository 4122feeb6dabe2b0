"""Command: replace a task's description."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TASK_ID, TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    cls=TaskCommand,
    examples=(
        'update 1 "Buy groceries and cook dinner"',
        "update 3 Review pull request",
    ),
)
@click.argument("task_id", type=TASK_ID)
@click.argument("description", nargs=-1, required=True)
@click.pass_obj
def update(app: AppContext, task_id: int, description: tuple[str, ...]) -> None:
    """Update the description of task TASK_ID."""
    text = " ".join(description)
    app.execute("update", lambda svc: svc.update(task_id, text))
