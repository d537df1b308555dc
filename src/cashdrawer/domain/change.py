"""Greedy change planning over a snapshot of drawer stock.

The planner never touches the drawer. It returns a :class:`ChangePlan`
that the drawer commits only when ``plan.complete`` is true.

For the Euro set the greedy walk is optimal when stock is unlimited. That
is a property of this particular set (it is canonical), not of greedy
change making in general: ``{4, 3, 1}`` makes 6 as 4+1+1 instead of 3+3.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ChangePlan:
    """Tentative payout: ``(denomination_cents, count)`` pairs, largest first."""

    payout: tuple[tuple[int, int], ...]
    remainder: int

    @property
    def complete(self) -> bool:
        return self.remainder == 0

    @property
    def pieces(self) -> int:
        return sum(count for _, count in self.payout)

    @property
    def paid_out(self) -> int:
        return sum(cents * count for cents, count in self.payout)


def plan_change(stock: Sequence[tuple[int, int]], change: int) -> ChangePlan:
    """Plan *change* cents out of *stock*, largest denomination first.

    Args:
        stock: ``(denomination_cents, available)`` pairs, strictly descending.
        change: Amount owed in cents.

    Returns:
        The plan. ``remainder`` is whatever the stock could not cover.
    """
    payout: list[tuple[int, int]] = []
    remaining = change
    for cents, available in stock:
        if remaining <= 0:
            break
        needed = remaining // cents
        if needed > 0:
            give = min(needed, available)
            if give > 0:
                payout.append((cents, give))
                remaining -= give * cents
    return ChangePlan(payout=tuple(payout), remainder=remaining)
