"""CashDrawer — denomination inventory plus greedy change making.

Settlement is one transaction against the drawer:

    VALIDATE → CHECK PAYMENT → PLAN → COMMIT (only if the plan is complete)

INVARIANT: A failed settlement leaves every count exactly as it was.
INVARIANT: Counts never go below zero.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from decimal import Decimal

from cashdrawer.domain.change import ChangePlan, plan_change
from cashdrawer.domain.denominations import (
    EURO_DENOMINATIONS,
    resolve_opening_counts,
    validate_order,
)
from cashdrawer.domain.money import from_cents, to_cents
from cashdrawer.domain.outcomes import (
    InsufficientChange,
    InsufficientPayment,
    Payout,
    SettlementResult,
    Success,
)


class CashDrawer:
    """A till holding a fixed, descending set of Euro denominations.

    The drawer is built once with its opening float and owns the counts
    from then on; the only way to change them is a successful
    :meth:`settle`.

    Usage::

        drawer = CashDrawer()
        outcome = drawer.settle("3.87", "12")
        if outcome.ok:
            for line in outcome.breakdown:
                ...
    """

    def __init__(self, opening_counts: Mapping[object, int] | None = None) -> None:
        counts = resolve_opening_counts(opening_counts)
        self._denominations = validate_order(EURO_DENOMINATIONS)
        self._counts: list[int] = [counts[cents] for cents in self._denominations]
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Settlement
    # ------------------------------------------------------------------

    def settle(
        self,
        price: Decimal | int | float | str,
        paid: Decimal | int | float | str,
    ) -> SettlementResult:
        """Work out and pay out the change for one sale.

        Raises:
            InvalidAmountError: *price* or *paid* is negative, non-numeric,
                or has more than two decimal places.
        """
        price_cents = to_cents(price)
        paid_cents = to_cents(paid)

        if paid_cents < price_cents:
            return InsufficientPayment(shortfall=from_cents(price_cents - paid_cents))

        change = paid_cents - price_cents
        if change == 0:
            return Success(change=from_cents(0))

        with self._lock:
            plan = plan_change(self._stock(), change)
            if not plan.complete:
                return InsufficientChange(remainder=from_cents(plan.remainder))
            self._commit(plan)

        return Success(
            change=from_cents(change),
            breakdown=tuple(
                Payout(denomination=from_cents(cents), count=count)
                for cents, count in plan.payout
            ),
        )

    def _stock(self) -> tuple[tuple[int, int], ...]:
        return tuple(zip(self._denominations, self._counts))

    def _commit(self, plan: ChangePlan) -> None:
        # Caller holds the lock; plan was built from these counts, so none
        # goes below zero.
        index = {cents: i for i, cents in enumerate(self._denominations)}
        for cents, count in plan.payout:
            self._counts[index[cents]] -= count

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> tuple[tuple[Decimal, int], ...]:
        """Snapshot of ``(denomination, count)`` pairs, largest first."""
        with self._lock:
            return tuple((from_cents(cents), count) for cents, count in self._stock())

    def count(self, denomination: Decimal | int | float | str) -> int:
        """Units of *denomination* in the drawer. Unknown values raise KeyError."""
        cents = to_cents(denomination)
        try:
            position = self._denominations.index(cents)
        except ValueError:
            raise KeyError(denomination) from None
        with self._lock:
            return self._counts[position]

    def total(self) -> Decimal:
        """Total value held, in major units."""
        with self._lock:
            return from_cents(sum(c * n for c, n in self._stock()))
