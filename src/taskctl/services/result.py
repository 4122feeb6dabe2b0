"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All successful service-layer methods return ServiceResult.
Failures are raised as domain errors and turned into a failed
ServiceResult by :func:`error_result` at the CLI boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from taskctl.domain.errors import DomainError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def error_result(op: str, exc: DomainError) -> ServiceResult:
    """Build a failed ServiceResult from a domain failure.

    The error code is the failure kind's discriminator (``exc.name``).
    """
    detail: dict[str, Any] = {}
    if exc.cause is not None:
        detail["cause"] = repr(exc.cause)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.name, message=exc.message, detail=detail),
    )
