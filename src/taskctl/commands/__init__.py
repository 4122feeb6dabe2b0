"""Subcommand modules for taskctl.

Provides register_commands() which uses deferred imports to keep
``taskctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from taskctl.commands.add import add
    from taskctl.commands.delete import delete
    from taskctl.commands.list_cmd import list_cmd
    from taskctl.commands.mark import SHORTCUTS, mark
    from taskctl.commands.show import show
    from taskctl.commands.update import update

    cli.add_command(add)
    cli.add_command(update)
    cli.add_command(delete)
    cli.add_command(mark)
    for shortcut in SHORTCUTS:
        cli.add_command(shortcut)
    cli.add_command(list_cmd)
    cli.add_command(show)
