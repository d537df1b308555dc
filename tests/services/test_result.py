"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from cashdrawer.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="settle", data={"change": "8.13"})
        assert result.ok is True
        assert result.op == "settle"
        assert result.data == {"change": "8.13"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INSUFFICIENT_CHANGE", message="No change available.")
        result = ServiceResult(ok=False, op="settle", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INSUFFICIENT_CHANGE"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="inventory",
            data={"total": "1022.00", "symbol": "€"},
            meta={"duration_ms": 1.5},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["symbol"] == "€"
        assert parsed["meta"]["duration_ms"] == 1.5

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="settle")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="INSUFFICIENT_PAYMENT",
            message="short",
            detail={"shortfall": "5.00"},
        )
        assert error.detail["shortfall"] == "5.00"

    def test_default_detail(self) -> None:
        assert ServiceError(code="INVALID_LINE", message="bad").detail == {}

    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="OUT_OF_PAPER", message="bad")  # type: ignore[arg-type]


class TestConstructors:
    def test_success(self) -> None:
        result = ServiceResult.success("replay", {"count": 0}, ["Line 2: short"])
        assert result.ok
        assert result.error is None
        assert result.warnings == ["Line 2: short"]

    def test_failure(self) -> None:
        result = ServiceResult.failure("settle", "INVALID_AMOUNT", "bad", {"price": "x"})
        assert not result.ok
        assert result.error == ServiceError(
            code="INVALID_AMOUNT", message="bad", detail={"price": "x"}
        )

    def test_failure_without_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceResult(ok=False, op="settle")

    def test_success_with_error_rejected(self) -> None:
        error = ServiceError(code="INVALID_LINE", message="bad")
        with pytest.raises(ValidationError):
            ServiceResult(ok=True, op="replay", error=error)
