"""DrawerService — settle sales against a CashDrawer and report the results.

Maps each :mod:`~cashdrawer.domain.outcomes` variant onto a
ServiceResult so the CLI (or any other front end) never deals with the
domain types directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from cashdrawer.domain.money import (
    InvalidAmountError,
    format_denomination,
    from_cents,
    to_cents,
)
from cashdrawer.domain.outcomes import InsufficientChange, InsufficientPayment, Success
from cashdrawer.services.base import BaseService
from cashdrawer.services.result import ServiceResult
from cashdrawer.services.telemetry import get_current_span, traced

logger = logging.getLogger(__name__)

NO_CHANGE_MESSAGE = "No change available. Please provide a smaller quantity to pay your bill."


class DrawerService(BaseService):
    """Settles sales, replays sale logs, and reports drawer stock."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def settle(self, price: Decimal | str, paid: Decimal | str) -> ServiceResult:
        """Settle one sale and report the change handed back."""
        op = "settle"
        try:
            outcome = self._drawer.settle(price, paid)
        except InvalidAmountError as exc:
            return _invalid_amount(op, exc)

        span = get_current_span()
        if span is not None:
            span.annotate("outcome", outcome.kind)

        if isinstance(outcome, InsufficientPayment):
            logger.info("Payment short by %s", outcome.shortfall)
            return ServiceResult.failure(
                op,
                "INSUFFICIENT_PAYMENT",
                "The money paid is not enough. Customer should pay "
                f"{self._money(outcome.shortfall)} more.",
                {
                    "price": _amount(price),
                    "paid": _amount(paid),
                    "shortfall": str(outcome.shortfall),
                },
            )

        if isinstance(outcome, InsufficientChange):
            logger.info("Cannot cover change, %s left over", outcome.remainder)
            return ServiceResult.failure(
                op,
                "INSUFFICIENT_CHANGE",
                NO_CHANGE_MESSAGE,
                {
                    "price": _amount(price),
                    "paid": _amount(paid),
                    "remainder": str(outcome.remainder),
                },
            )

        if span is not None:
            span.annotate("pieces", outcome.pieces)
        logger.debug("Paid out %s in %d pieces", outcome.change, outcome.pieces)
        return ServiceResult.success(
            op,
            {
                "price": _amount(price),
                "paid": _amount(paid),
                "symbol": self._config.currency_symbol,
                **self._success_payload(outcome),
            },
        )

    @traced
    def inventory(self) -> ServiceResult:
        """Report every denomination with its count and subtotal."""
        return ServiceResult.success("inventory", self._inventory_payload())

    @traced
    def replay(self, lines: Iterable[str]) -> ServiceResult:
        """Settle a log of ``PRICE PAID`` lines in order against one drawer.

        Every line is validated before any sale is settled, so a malformed
        log changes nothing. Blank lines and ``#`` comments are skipped.
        Failed sales do not fail the replay; they show up per entry and
        as warnings.
        """
        op = "replay"
        sales: list[tuple[int, str, str]] = []
        try:
            for number, raw in enumerate(lines, start=1):
                text = raw.split("#", 1)[0].strip()
                if not text:
                    continue
                parts = text.split()
                problem = _check_line(parts)
                if problem:
                    return ServiceResult.failure(
                        op,
                        "INVALID_LINE",
                        f"Line {number}: {problem}",
                        {"line": number, "text": raw.rstrip("\n")},
                    )
                sales.append((number, parts[0], parts[1]))
        except UnicodeDecodeError as exc:
            # Decoding runs ahead of line splitting, so no line number.
            return ServiceResult.failure(
                op,
                "INVALID_LINE",
                f"Sale log is not valid {exc.encoding} text: {exc.reason}",
                {"encoding": exc.encoding, "reason": exc.reason},
            )

        entries: list[dict[str, Any]] = []
        warnings: list[str] = []
        for number, price, paid in sales:
            outcome = self._drawer.settle(price, paid)
            entry: dict[str, Any] = {
                "line": number,
                "price": _amount(price),
                "paid": _amount(paid),
                "outcome": outcome.kind,
            }
            if isinstance(outcome, Success):
                entry.update(self._success_payload(outcome))
            elif isinstance(outcome, InsufficientPayment):
                entry["shortfall"] = str(outcome.shortfall)
                warnings.append(
                    f"Line {number}: payment short by {self._money(outcome.shortfall)}"
                )
            else:
                entry["remainder"] = str(outcome.remainder)
                warnings.append(
                    f"Line {number}: no change available "
                    f"({self._money(outcome.remainder)} uncovered)"
                )
            entries.append(entry)

        settled = sum(1 for e in entries if e["outcome"] == "success")
        span = get_current_span()
        if span is not None:
            span.annotate("sales", len(entries))
            span.annotate("settled", settled)
        logger.debug("Replayed %d sales, %d settled", len(entries), settled)

        return ServiceResult.success(
            op,
            {
                "count": len(entries),
                "settled": settled,
                "failed": len(entries) - settled,
                "sales": entries,
                **self._inventory_payload(),
            },
            warnings,
        )

    # ------------------------------------------------------------------
    # Payload helpers
    # ------------------------------------------------------------------

    def _label(self, denomination: Decimal) -> str:
        return f"{format_denomination(to_cents(denomination))} {self._config.currency_label}"

    def _money(self, amount: Decimal) -> str:
        return f"{amount}{self._config.currency_symbol}"

    def _success_payload(self, outcome: Success) -> dict[str, Any]:
        return {
            "change": str(outcome.change),
            "pieces": outcome.pieces,
            "breakdown": [
                {
                    "denomination": str(line.denomination),
                    "label": self._label(line.denomination),
                    "count": line.count,
                }
                for line in outcome.breakdown
            ],
        }

    def _inventory_payload(self) -> dict[str, Any]:
        rows = [
            {
                "denomination": str(denomination),
                "label": self._label(denomination),
                "count": count,
                "subtotal": str(denomination * count),
            }
            for denomination, count in self._drawer.state
        ]
        return {
            "inventory": rows,
            "pieces": sum(row["count"] for row in rows),
            "total": str(self._drawer.total()),
            "symbol": self._config.currency_symbol,
        }


def _amount(value: Decimal | str) -> str:
    """Echo an already-validated amount back with two decimals."""
    return str(from_cents(to_cents(value)))


def _check_line(parts: list[str]) -> str | None:
    if len(parts) != 2:
        return f"expected 'PRICE PAID', got {len(parts)} field(s)"
    for part in parts:
        try:
            to_cents(part)
        except InvalidAmountError as exc:
            return str(exc)
    return None


def _invalid_amount(op: str, exc: InvalidAmountError) -> ServiceResult:
    return ServiceResult.failure(op, "INVALID_AMOUNT", str(exc))
