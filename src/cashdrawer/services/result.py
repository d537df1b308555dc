"""Result envelope handed from DrawerService to the CLI.

A sale that cannot be settled is a normal till event, so it travels as
an ``ok=False`` result carrying one of the :data:`ErrorCode` values.
Only programming errors escape a service method as exceptions.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

ErrorCode = Literal[
    "INSUFFICIENT_PAYMENT",
    "INSUFFICIENT_CHANGE",
    "INVALID_AMOUNT",
    "INVALID_LINE",
]


class ServiceError(BaseModel):
    """Why an operation failed: a stable code, a message for the cashier,
    and the amounts involved under ``detail``."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """What a drawer operation produced.

    ``data`` holds the payload of a successful ``op`` (``settle``,
    ``inventory``, ``replay``); ``error`` is set exactly when ``ok`` is
    False. ``meta`` stays None unless telemetry added a span.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            raise ValueError("error must be set exactly when ok is False")
        return self

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
