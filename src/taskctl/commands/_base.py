"""Shared Click pieces for taskctl commands.

``TaskCommand`` adds an eager ``--examples`` flag so ``--help`` stays
short. Examples are written without the program name; ``taskctl`` is
prefixed when they are printed.

``TASK_ID`` converts a positional id and rejects anything that cannot
name a task before the tasks file is opened.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


class TaskIdParam(click.ParamType):
    """A task id: a base-10 integer of at least 1."""

    name = "task_id"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            task_id = value
        else:
            try:
                task_id = int(str(value).strip(), 10)
            except ValueError:
                self.fail(f"{value!r} is not a task id", param, ctx)
        if task_id < 1:
            self.fail(f"task ids start at 1, got {task_id}", param, ctx)
        return task_id


TASK_ID = TaskIdParam()

PROG_NAME = "taskctl"


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    for line in getattr(ctx.command, "examples", ()):
        click.echo(f"  {PROG_NAME} {line}")
    ctx.exit(0)


class TaskCommand(click.Command):
    """Click command carrying usage examples for ``--examples``."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )
