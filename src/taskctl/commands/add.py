"""Command: add a new task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


@click.command(
    cls=TaskCommand,
    examples=(
        'add "Buy groceries"',
        "add Write the quarterly report",
        '--json add "Call the plumber"',
    ),
)
@click.argument("description", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, description: tuple[str, ...]) -> None:
    """Add a task. Words are joined into one description."""
    text = " ".join(description)
    app.execute("add", lambda svc: svc.add(text))
