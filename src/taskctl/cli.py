"""taskctl entry point: global flags, settings, and command registration."""

from __future__ import annotations

import click

from taskctl import __version__
from taskctl.commands import register_commands
from taskctl.commands._base import PROG_NAME
from taskctl.commands._context import AppContext
from taskctl.config.settings import TaskSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids, or an OK/ERROR line.")
@click.option("-v", "--verbose", is_flag=True, help="Show timestamps, error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Use this config file instead of searching for taskctl.toml.",
)
@click.option(
    "-f",
    "--file",
    "tasks_file",
    help="Tasks file to operate on (overrides [storage] file).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    tasks_file: str | None,
    **flags: bool,
) -> None:
    """taskctl keeps todo, in-progress and done tasks in a JSON file."""
    settings = TaskSettings.from_cli(config_path=config_path, tasks_file=tasks_file, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
