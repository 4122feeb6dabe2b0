"""Logging for taskctl: structlog rendering on top of stdlib loggers.

Modules log through ``logging.getLogger(__name__)``; records pass through
structlog's ``ProcessorFormatter`` and go to stderr, leaving stdout to
results. Every record carries ``tasks_file`` once an invocation has
bound it.

``--verbose`` opens the ``taskctl`` logger to DEBUG. Other libraries
stay at WARNING either way.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

TASKCTL_LOGGER = "taskctl"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    tasks_path: Path | None = None,
) -> None:
    """Route all logging to stderr and set taskctl's level.

    Safe to call repeatedly: the root handler is replaced, not stacked,
    and bound context from an earlier call is cleared.

    Args:
        verbose: DEBUG for ``taskctl.*`` loggers instead of WARNING.
        log_json: One JSON object per line instead of console output.
        tasks_path: Bound as ``tasks_file`` on every record.
    """
    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(TASKCTL_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if tasks_path is not None:
        structlog.contextvars.bind_contextvars(tasks_file=str(tasks_path))
