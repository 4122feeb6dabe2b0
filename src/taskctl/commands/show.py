"""Command: show one task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TASK_ID, TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    cls=TaskCommand,
    examples=("show 1", "--json show 1"),
)
@click.argument("task_id", type=TASK_ID)
@click.pass_obj
def show(app: AppContext, task_id: int) -> None:
    """Show task TASK_ID with its timestamps."""
    app.execute("get", lambda svc: svc.get(task_id))
