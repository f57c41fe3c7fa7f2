"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
Expected failures are values (``ok=False`` with a ServiceError), never
exceptions; the CLI and any other front end consume this one type.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable error codes surfaced in ``ServiceError.code``."""

    INVALID_COUNT = "INVALID_COUNT"
    INVALID_COLOR = "INVALID_COLOR"
    UNKNOWN_ALGORITHM = "UNKNOWN_ALGORITHM"
    UNKNOWN_SHAPE = "UNKNOWN_SHAPE"
    EMPTY_MARKUP = "EMPTY_MARKUP"
    INVALID_FORMAT = "INVALID_FORMAT"
    EXPORT_FAILED = "EXPORT_FAILED"


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
        op: Name of the operation (e.g. ``"generate_batch"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as inputs replaced by defaults.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans, timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode | str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
