"""JsonTaskStore — file-backed task repository.

INVARIANT: The tasks file is always either the previous or the next
complete snapshot. Writes go to a temp file in the same directory and
are swapped in with :func:`os.replace`.

Every low-level failure (``OSError``, malformed JSON, records that do not
validate) surfaces as :class:`~taskctl.domain.errors.StorageError` with
the original exception attached as its cause.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from taskctl.domain.errors import StorageError
from taskctl.domain.task import Task

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class TaskRepository(Protocol):
    """Persistence port used by the service layer."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: list[Task]) -> None: ...


class JsonTaskStore:
    """Store tasks as a JSON array in a single file.

    The file (and its parent directories) are created empty on first use.
    An empty file means "no tasks".
    """

    def __init__(self, path: Path, *, indent: int = 2) -> None:
        self._path = Path(path).absolute()
        self._indent = indent
        _ensure_file(self._path)

    @property
    def path(self) -> Path:
        """Absolute path of the tasks file."""
        return self._path

    def load(self) -> list[Task]:
        """Read all tasks from disk."""
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise StorageError(f"cannot read {self._path}", exc) from exc

        try:
            text = raw.decode("utf-8")
            if not text.strip():
                return []
            data = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"corrupted JSON in {self._path}", exc) from exc

        if data is None:
            return []

        try:
            tasks = _TASK_LIST.validate_python(data)
        except PydanticValidationError as exc:
            raise StorageError(f"corrupted JSON in {self._path}", exc) from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Atomically replace the tasks file with *tasks*."""
        payload = json.dumps([t.to_record() for t in tasks], indent=self._indent)
        tmp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                prefix="tasks-",
                suffix=".json",
                dir=self._path.parent,
                delete=False,
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(payload)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self._path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"cannot write {self._path}", exc) from exc

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)


def _ensure_file(path: Path) -> None:
    """Create *path* as an empty file unless it already exists."""
    if path.is_dir():
        msg = f"tasks path is a directory, expected a file: {path}"
        raise StorageError(msg)
    if path.exists():
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    except OSError as exc:
        raise StorageError(f"cannot create {path}", exc) from exc
    logger.debug("Created empty tasks file at %s", path)
