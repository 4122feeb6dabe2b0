"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from taskctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list":
        return "\n".join(str(item["id"]) for item in result.data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="task.ok")
    op = Text(f"  {result.op}", style="task.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="task.key")
    if key == "id":
        v = Text(str(value), style="task.id")
    elif key == "description":
        v = Text(str(value), style="task.description")
    elif key in ("status", "previous_status"):
        v = Text(str(value), style=style_for_status(str(value)))
    elif key in ("createdAt", "updatedAt"):
        v = Text(str(value), style="task.time")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _task_table(items: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table for a list of task records."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="task.id", no_wrap=True, justify="right")
    table.add_column("Status", no_wrap=True)
    table.add_column("Description", style="task.description")
    if verbose:
        table.add_column("Created", style="task.time")
        table.add_column("Updated", style="task.time")

    for item in items:
        status = str(item.get("status", ""))
        row: list[Any] = [
            str(item.get("id", "")),
            Text(status, style=style_for_status(status)),
            Text(str(item.get("description", ""))),
        ]
        if verbose:
            row.append(str(item.get("createdAt", "")))
            row.append(str(item.get("updatedAt", "")))
        table.add_row(*row)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="task.error")
    op = Text(f"  {result.op}", style="task.op")
    sep = Text(" — ")
    console.print(Text.assemble(label, op, sep, msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderer ─────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/update/mark/delete results."""
    _status_line(console, result)
    for key in ("id", "description", "previous_status", "status"):
        if key in result.data:
            _field(console, key, result.data[key])
    if "fields_changed" in result.data:
        _field(console, "fields_changed", ", ".join(result.data["fields_changed"]))
    if verbose:
        for key in ("createdAt", "updatedAt"):
            if key in result.data:
                _field(console, key, result.data[key])
        _render_meta(console, result)


# ── Query renderers ───────────────────────────────────────────────────


def _render_task_panel(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single task as a panel."""
    d = result.data
    status = str(d.get("status", ""))
    lines = [
        f"status: {status}",
        f"created: {d.get('createdAt', '')}",
        f"updated: {d.get('updatedAt', '')}",
    ]
    content = "\n".join(lines) + f"\n\n{d.get('description', '')}"
    title = f"#{d.get('id', '?')}"
    style = style_for_status(status)
    console.print(Panel(Text(content), title=title, border_style=style or "dim", expand=False))


def _render_task_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list results as a table."""
    items = result.data.get("items", [])
    status = result.data.get("status")
    if not items:
        suffix = f" with status {status}" if status else ""
        console.print(f"No tasks{suffix}.")
        return
    console.print(_task_table(items, verbose=verbose))
    noun = "task" if len(items) == 1 else "tasks"
    console.print(f"\n{result.data.get('count', len(items))} {noun}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add": _render_mutation,
    "update": _render_mutation,
    "mark": _render_mutation,
    "delete": _render_mutation,
    # Query
    "get": _render_task_panel,
    "list": _render_task_table,
}
