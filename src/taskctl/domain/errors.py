"""Domain failure kinds raised by task operations.

Three distinct kinds let the CLI boundary branch on *why* an operation
failed (exit code, message) without comparing message text:

- :class:`ValidationError` — input broke a domain rule.
- :class:`NotFoundError` — the referenced task id does not exist.
- :class:`StorageError` — the persistence layer failed.

These are raised at the point of failure and propagate unmodified.
Nothing in the domain layer catches them.
"""

from __future__ import annotations

from typing import ClassVar


class DomainError(Exception):
    """Base for all task domain failures.

    Attributes:
        message: Human-readable description of the failure.
        cause: The lower-level failure that triggered this one, if any.
            Kept by reference for diagnostics only.
        name: Fixed discriminator naming the failure kind.
    """

    name: ClassVar[str] = "DomainError"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ValidationError(DomainError):
    """Input failed a domain rule (invalid status, empty description)."""

    name: ClassVar[str] = "ValidationError"


class NotFoundError(DomainError):
    """The referenced task id does not exist."""

    name: ClassVar[str] = "NotFoundError"


class StorageError(DomainError):
    """The underlying persistence operation failed."""

    name: ClassVar[str] = "StorageError"
