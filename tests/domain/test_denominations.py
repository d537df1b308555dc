"""Tests for the Euro denomination set and opening counts."""

from decimal import Decimal

import pytest

from cashdrawer.domain.denominations import (
    DEFAULT_OPENING_COUNTS,
    EURO_DENOMINATIONS,
    resolve_opening_counts,
    validate_order,
)


class TestEuroSet:
    def test_strictly_descending(self) -> None:
        assert validate_order(EURO_DENOMINATIONS) == EURO_DENOMINATIONS
        assert list(EURO_DENOMINATIONS) == sorted(set(EURO_DENOMINATIONS), reverse=True)

    def test_twelve_values(self) -> None:
        assert EURO_DENOMINATIONS[0] == 5000
        assert EURO_DENOMINATIONS[-1] == 1
        assert len(EURO_DENOMINATIONS) == 12

    def test_default_float(self) -> None:
        assert DEFAULT_OPENING_COUNTS[5000] == 10
        assert DEFAULT_OPENING_COUNTS[2000] == 10
        assert DEFAULT_OPENING_COUNTS[1000] == 10
        for cents in (500, 200, 100, 50, 20, 10, 5, 2, 1):
            assert DEFAULT_OPENING_COUNTS[cents] == 25


class TestValidateOrder:
    def test_ascending_rejected(self) -> None:
        with pytest.raises(ValueError, match="strictly descending"):
            validate_order([1, 2, 5])

    def test_duplicate_rejected(self) -> None:
        with pytest.raises(ValueError, match="strictly descending"):
            validate_order([500, 200, 200, 1])

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            validate_order([5, 0])

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            validate_order([])


class TestResolveOpeningCounts:
    def test_no_overrides_gives_defaults(self) -> None:
        assert resolve_opening_counts() == DEFAULT_OPENING_COUNTS
        assert resolve_opening_counts({}) == DEFAULT_OPENING_COUNTS

    def test_sparse_override(self) -> None:
        counts = resolve_opening_counts({"0.5": 3, 50: 1, Decimal("0.01"): 0})
        assert counts[50] == 3
        assert counts[5000] == 1
        assert counts[1] == 0
        assert counts[200] == 25

    def test_defaults_not_mutated(self) -> None:
        resolve_opening_counts({"5": 0})
        assert DEFAULT_OPENING_COUNTS[500] == 25

    def test_unknown_denomination(self) -> None:
        with pytest.raises(ValueError, match="Unknown denomination"):
            resolve_opening_counts({"0.03": 4})

    @pytest.mark.parametrize("count", [-1, 2.5, "3", True])
    def test_bad_count(self, count: object) -> None:
        with pytest.raises(ValueError, match="non-negative integer"):
            resolve_opening_counts({"1": count})  # type: ignore[dict-item]
