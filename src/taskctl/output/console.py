"""Rich Console factory and theme for taskctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TASK_THEME = Theme(
    {
        "task.ok": "bold green",
        "task.error": "bold red",
        "task.warning": "bold yellow",
        "task.op": "bold cyan",
        "task.key": "dim",
        "task.id": "bold blue",
        "task.description": "bold",
        "task.time": "dim",
        "task.status.todo": "yellow",
        "task.status.in_progress": "cyan",
        "task.status.done": "green",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "todo": "task.status.todo",
    "in-progress": "task.status.in_progress",
    "done": "task.status.done",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TASK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a task status."""
    return _STATUS_STYLES.get(status, "")
