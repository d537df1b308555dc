"""Tests for the format_result dispatcher and OutputSettings."""

import json

from cashdrawer.output.formatters import OutputSettings, format_result
from cashdrawer.services.result import ServiceResult


def _ok(op: str = "settle", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "settle", msg: str = "fail") -> ServiceResult:
    return ServiceResult.failure(op, "INVALID_AMOUNT", msg)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok(change="8.13"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["change"] == "8.13"

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_settings_override_shorthand(self) -> None:
        output = format_result(_err(msg="Bad"), json_output=True, settings=OutputSettings())
        assert output.startswith("ERROR")

    def test_quiet_mode(self) -> None:
        output = format_result(
            _ok("inventory", total="10.00", symbol="€"), settings=OutputSettings(quiet=True)
        )
        assert output == "10.00€"

    def test_human_mode(self) -> None:
        output = format_result(_ok("audit", total="1.00"))
        assert "OK" in output
        assert "total: 1.00" in output
