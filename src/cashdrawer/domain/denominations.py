"""The fixed Euro denomination set and its default opening float.

Values are integer cents, strictly descending. The greedy planner relies
on that order, so every inventory is validated against it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from cashdrawer.domain.money import format_denomination, to_cents

EURO_DENOMINATIONS: tuple[int, ...] = (
    5000,
    2000,
    1000,
    500,
    200,
    100,
    50,
    20,
    10,
    5,
    2,
    1,
)

# Ten of each bill from 10 up, twenty-five of everything smaller.
DEFAULT_OPENING_COUNTS: dict[int, int] = {
    cents: (10 if cents >= 1000 else 25) for cents in EURO_DENOMINATIONS
}


def validate_order(denominations: Iterable[int]) -> tuple[int, ...]:
    """Return *denominations* as a tuple, or raise if not strictly descending.

    Rejects non-positive values and duplicates (a duplicate breaks strict
    ordering).
    """
    values = tuple(denominations)
    if not values:
        raise ValueError("A drawer needs at least one denomination")
    for value in values:
        if value <= 0:
            raise ValueError(f"Denomination must be positive: {value}")
    for larger, smaller in zip(values, values[1:]):
        if larger <= smaller:
            raise ValueError(
                "Denominations must be strictly descending: "
                f"{format_denomination(larger)} before {format_denomination(smaller)}"
            )
    return values


def resolve_opening_counts(overrides: Mapping[object, int] | None = None) -> dict[int, int]:
    """Merge sparse *overrides* onto the default opening float.

    Keys may be any amount :func:`to_cents` accepts (``"0.5"``, ``50``,
    ``Decimal("0.05")``). Keys outside the Euro set and negative counts
    raise ``ValueError``.
    """
    counts = dict(DEFAULT_OPENING_COUNTS)
    for key, count in (overrides or {}).items():
        cents = to_cents(key)  # type: ignore[arg-type]
        if cents not in counts:
            raise ValueError(f"Unknown denomination: {key}")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Count for {key} must be a non-negative integer, got {count!r}")
        counts[cents] = count
    return counts
