"""Money normalization between boundary decimals and integer cents.

All arithmetic inside the drawer happens on integer cents. Amounts enter
and leave as :class:`~decimal.Decimal` with two fractional digits.

INVARIANT: ``to_cents(from_cents(n)) == n`` for every int in
``0..MAX_CENTS``.
"""

from __future__ import annotations

from decimal import Decimal, DecimalException

CENT = Decimal("0.01")

# One billion in major units. Keeps every accepted amount well inside
# the default 28-digit Decimal context.
MAX_CENTS = 100_000_000_000
MAX_AMOUNT = Decimal(MAX_CENTS) * CENT


class InvalidAmountError(ValueError):
    """An amount is negative, not numeric, too large, or finer than one cent."""


def to_cents(value: Decimal | int | float | str) -> int:
    """Convert a major-unit amount to integer cents.

    Floats go through ``str`` first so ``3.87`` means 387 cents rather
    than its binary approximation. Amounts above :data:`MAX_AMOUNT` are
    rejected before any rounding arithmetic runs.

    Examples:
        >>> to_cents("12")
        1200
        >>> to_cents(3.87)
        387
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (DecimalException, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Not a monetary amount: {value!r}") from exc

    if not amount.is_finite():
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount cannot be negative: {value!r}")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount exceeds {MAX_AMOUNT}: {value!r}")

    # Comparison is exact; only quantize rounds, and the bound above keeps
    # its result to at most 13 digits.
    try:
        whole = amount.quantize(CENT)
    except DecimalException as exc:
        raise InvalidAmountError(f"Not a monetary amount: {value!r}") from exc
    if whole != amount:
        raise InvalidAmountError(f"Amount is finer than one cent: {value!r}")
    return int(whole.scaleb(2))


def from_cents(cents: int) -> Decimal:
    """Return *cents* as a two-place Decimal (``813 -> Decimal("8.13")``).

    Built from digits, so drawer totals of any size stay exact.
    """
    units, rest = divmod(abs(cents), 100)
    sign = "-" if cents < 0 else ""
    return Decimal(f"{sign}{units}.{rest:02d}")


def format_amount(cents: int, symbol: str = "") -> str:
    """Format *cents* with exactly two decimals and an optional suffix symbol."""
    return f"{from_cents(cents)}{symbol}"


def format_denomination(cents: int) -> str:
    """Format a face value the short way: ``5000 -> "50"``, ``50 -> "0.5"``."""
    return f"{from_cents(cents).normalize():f}"
