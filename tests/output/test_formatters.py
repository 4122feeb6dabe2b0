"""Tests for the format_result dispatcher and OutputSettings."""

import json

from taskctl.output.formatters import OutputSettings, format_result
from taskctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ValidationError", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("add", id=1), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "add"
        assert data["data"]["id"] == 1

    def test_json_mode_error(self) -> None:
        output = format_result(_err("add", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "ValidationError"
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"), settings=OutputSettings(json_output=False), json_output=True
        )
        assert output.startswith("{") is False


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("add", id=1), settings=OutputSettings(quiet=True))
        assert output == "OK: add"

    def test_quiet_list_prints_ids(self) -> None:
        result = _ok("list", count=2, status=None, items=[{"id": 1}, {"id": 3}])
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output == "1\n3"

    def test_quiet_error(self) -> None:
        output = format_result(_err("add", "Bad input"), settings=OutputSettings(quiet=True))
        assert "ERROR" in output
        assert "Bad input" in output


class TestFormatResultDefault:
    def test_default_success_contains_ok(self) -> None:
        output = format_result(_ok("add", id=1, description="Buy milk"))
        assert "OK" in output
        assert "add" in output
        assert "Buy milk" in output

    def test_default_error_contains_error(self) -> None:
        output = format_result(_err("add", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
