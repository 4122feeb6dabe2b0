"""TaskSettings: CLI flags, ``TASKCTL_*`` env vars and taskctl.toml merged.

Priority chain (highest to lowest):
  1. Flags given on the command line
  2. Env vars, ``TASKCTL_`` prefix, ``__`` between nested keys
  3. The TOML file found by :func:`~taskctl.config.discovery.find_config`
  4. Code defaults in :mod:`taskctl.config.models`

Boolean flags can only switch a setting on: a flag left off the command
line never masks an env var or TOML value.

Anything wrong with the configuration (unreadable TOML, a bad
``[storage]`` table, an env var of the wrong type) is reported as a
:class:`click.ClickException` naming where it came from.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from taskctl.config.discovery import find_config
from taskctl.config.models import StorageConfig

# TOML file for the TaskSettings currently being built.
_active_toml: ContextVar[Path | None] = ContextVar("taskctl_active_toml", default=None)


def _describe(exc: ValidationError) -> str:
    """One-line summary of a pydantic error: ``loc: msg; loc: msg``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in exc.errors()
    )


class TaskTomlSource(TomlConfigSettingsSource):
    """taskctl.toml source that checks the file before settings see it."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        try:
            super().__init__(settings_cls, toml_file=toml_path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        if "storage" in self.toml_data:
            try:
                StorageConfig.model_validate(self.toml_data["storage"])
            except ValidationError as exc:
                msg = f"Invalid [storage] in {toml_path}: {_describe(exc)}"
                raise click.ClickException(msg) from exc


class TaskSettings(BaseSettings):
    """Resolved settings for one taskctl invocation.

    Attributes:
        root: Directory holding the config file, or the working directory
            when there is none. A relative ``storage.file`` resolves here.
        config_path: The TOML file in effect, or None.
        tasks_file: ``--file`` override for the tasks file.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TASKCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    tasks_file: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)

    @property
    def tasks_path(self) -> Path:
        """The tasks file to operate on."""
        if self.tasks_file is not None:
            return self.tasks_file
        path = Path(self.storage.file).expanduser()
        return path if path.is_absolute() else self.root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TaskTomlSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        tasks_file: str | None = None,
        **flags: bool | None,
    ) -> TaskSettings:
        """Build settings for a CLI invocation.

        *config_path* is the ``--config`` value; without it the config is
        found via ``TASKCTL_CONFIG`` or a walk up from *root* (default:
        cwd). Only flags that are switched on become overrides.
        """
        toml_path = find_config(root, explicit=config_path)
        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()

        overrides: dict[str, Any] = {name: True for name, on in flags.items() if on}
        if tasks_file:
            overrides["tasks_file"] = Path(tasks_file)

        token = _active_toml.set(toml_path)
        try:
            return cls(root=root, config_path=toml_path, **overrides)
        except ValidationError as exc:
            raise click.ClickException(f"Invalid settings: {_describe(exc)}") from exc
        finally:
            _active_toml.reset(token)
