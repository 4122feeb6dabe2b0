"""Locate the taskctl.toml that applies to an invocation.

Resolution order: ``--config``, then ``TASKCTL_CONFIG``, then a walk up
from the starting directory (like git looking for ``.git/``). A file
named explicitly must exist; a walk-up that finds nothing means "use
the defaults".
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "taskctl.toml"
CONFIG_ENV_VAR = "TASKCTL_CONFIG"


def find_config(start: Path | None = None, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none.

    Raises:
        click.ClickException: *explicit* or ``TASKCTL_CONFIG`` names a
            file that does not exist.
    """
    named, origin = _named_config(explicit)
    if named is not None:
        if not named.is_file():
            raise click.ClickException(f"config file not found: {named} (from {origin})")
        return named

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _named_config(explicit: str | Path | None) -> tuple[Path | None, str]:
    if explicit:
        return Path(explicit).expanduser().absolute(), "--config"
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser().absolute(), CONFIG_ENV_VAR
    return None, ""
