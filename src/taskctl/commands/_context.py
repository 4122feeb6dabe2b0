"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy store initialization, the domain
error boundary, and centralized result emission (stdout/stderr routing
+ exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from taskctl.domain.errors import DomainError
from taskctl.output.formatters import OutputSettings, format_result
from taskctl.services.result import error_result

if TYPE_CHECKING:
    from collections.abc import Callable

    from taskctl.config.settings import TaskSettings
    from taskctl.infrastructure.store import JsonTaskStore
    from taskctl.services.result import ServiceResult
    from taskctl.services.task import TaskService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3

# Keyed by ServiceError.code (the domain failure's ``name``).
_EXIT_CODES: dict[str, int] = {
    "ValidationError": EXIT_USAGE,
    "NotFoundError": EXIT_NOT_FOUND,
    "StorageError": EXIT_FAILURE,
}


def exit_code_for(result: ServiceResult) -> int:
    """Exit status for a result: 0 on success, per-kind code on failure."""
    if result.ok:
        return EXIT_OK
    if result.error is None:
        return EXIT_FAILURE
    return _EXIT_CODES.get(result.error.code, EXIT_FAILURE)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The store is lazily
    initialized on first use so ``--help`` and ``--version`` never
    touch the tasks file.
    """

    def __init__(self, settings: TaskSettings) -> None:
        self.settings = settings
        self._store: JsonTaskStore | None = None

        from taskctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            tasks_path=settings.tasks_path,
        )

    @property
    def store(self) -> JsonTaskStore:
        """The task store (created lazily on first access)."""
        if self._store is None:
            from taskctl.infrastructure.store import JsonTaskStore

            self._store = JsonTaskStore(
                self.settings.tasks_path,
                indent=self.settings.storage.indent,
            )
        return self._store

    def execute(self, op: str, action: Callable[[TaskService], ServiceResult]) -> None:
        """Run *action* against a TaskService and emit its result.

        This is the only place domain failures are caught: they become a
        failed ServiceResult whose exit code reflects the failure kind.
        """
        from taskctl.services.task import TaskService

        try:
            result = action(TaskService(self.store))
        except DomainError as exc:
            logger.debug("%s failed: %s", op, exc.name, exc_info=exc)
            result = error_result(op, exc)
        self.emit(result)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with the failure kind's code.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(exit_code_for(result))
