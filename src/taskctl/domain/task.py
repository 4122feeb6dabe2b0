"""Task entity and status rules.

A task moves freely between ``todo``, ``in-progress`` and ``done``: there
is no transition graph. The only status rule is membership, checked by
:func:`is_valid_status`. Plain attribute assignment is not validated;
callers go through :meth:`Task.set_status` or check the value first.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from taskctl.domain.errors import ValidationError


class TaskStatus(StrEnum):
    """Lifecycle states of a task."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


VALID_STATUSES: frozenset[str] = frozenset(s.value for s in TaskStatus)


def is_valid_status(value: object) -> bool:
    """Return True iff *value* is exactly one of the three status strings.

    Case-sensitive with no trimming. Never raises.

    Examples:
        >>> is_valid_status("in-progress")
        True
        >>> is_valid_status("DONE")
        False
        >>> is_valid_status("in progress")
        False
    """
    return isinstance(value, str) and value in VALID_STATUSES


def parse_status(value: str) -> TaskStatus:
    """Convert *value* to a :class:`TaskStatus` or raise ValidationError."""
    if not is_valid_status(value):
        msg = f"invalid status {value!r} (expected: todo|in-progress|done)"
        raise ValidationError(msg)
    return TaskStatus(value)


def now_iso() -> str:
    """Current UTC time as ISO 8601 with microseconds."""
    return datetime.now(UTC).isoformat()


class Task(BaseModel):
    """One tracked unit of work.

    ``id`` and ``created_at`` are frozen; the rest is mutable. Records
    serialize with camelCase timestamp keys (``createdAt``/``updatedAt``).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(frozen=True)
    description: str
    status: str = TaskStatus.TODO.value
    created_at: str = Field(alias="createdAt", frozen=True)
    updated_at: str = Field(alias="updatedAt")

    def update_description(self, description: str) -> None:
        """Replace the description and refresh ``updated_at``."""
        _require_description(description)
        self.description = description
        self.updated_at = now_iso()

    def set_status(self, status: str) -> None:
        """Move the task to *status* and refresh ``updated_at``.

        Any status may follow any other, including itself.
        """
        self.status = parse_status(status).value
        self.updated_at = now_iso()

    def to_record(self) -> dict[str, object]:
        """Return the persisted record shape."""
        return self.model_dump(by_alias=True)


def new_task(task_id: int, description: str) -> Task:
    """Build a fresh ``todo`` task with both timestamps set to now."""
    if task_id <= 0:
        raise ValidationError("id must be positive")
    _require_description(description)
    now = now_iso()
    return Task(
        id=task_id,
        description=description,
        status=TaskStatus.TODO.value,
        created_at=now,
        updated_at=now,
    )


def _require_description(description: str) -> None:
    if not description.strip():
        raise ValidationError("description cannot be empty")
