"""Settlement outcomes returned by :meth:`CashDrawer.settle`.

Three frozen variants discriminated by ``kind``. Failures are values, not
exceptions: a short payment or an empty coin tube is an ordinary outcome
at a till.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Payout(BaseModel):
    """One line of a change breakdown."""

    model_config = {"frozen": True}

    denomination: Decimal
    count: int = Field(gt=0)


class Success(BaseModel):
    """Change was paid out in full and the drawer was debited."""

    model_config = {"frozen": True}

    kind: Literal["success"] = "success"
    change: Decimal
    breakdown: tuple[Payout, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    @property
    def pieces(self) -> int:
        return sum(line.count for line in self.breakdown)


class InsufficientPayment(BaseModel):
    """The customer paid less than the price."""

    model_config = {"frozen": True}

    kind: Literal["insufficient_payment"] = "insufficient_payment"
    shortfall: Decimal

    @property
    def ok(self) -> bool:
        return False


class InsufficientChange(BaseModel):
    """The drawer could not cover the change; nothing was paid out."""

    model_config = {"frozen": True}

    kind: Literal["insufficient_change"] = "insufficient_change"
    remainder: Decimal

    @property
    def ok(self) -> bool:
        return False


SettlementResult = Annotated[
    Success | InsufficientPayment | InsufficientChange,
    Field(discriminator="kind"),
]
