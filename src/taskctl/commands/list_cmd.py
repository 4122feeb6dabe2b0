"""Command: list tasks, optionally by status."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    "list",
    cls=TaskCommand,
    examples=("list", "list done", "list in-progress", "-q list todo"),
)
@click.argument("status", required=False)
@click.pass_obj
def list_cmd(app: AppContext, status: str | None) -> None:
    """List tasks sorted by id. STATUS is todo, in-progress, or done."""
    app.execute("list", lambda svc: svc.list(status))
