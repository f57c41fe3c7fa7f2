"""Tests for the format_result dispatcher and OutputSettings."""

import dataclasses
import json

import pytest

from glyphctl.output.formatters import OutputSettings, format_result
from glyphctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.width is None

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.json_output = False  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        data = json.loads(format_result(_ok("contrast", ratio=21.0), settings=settings))
        assert data["ok"] is True
        assert data["op"] == "contrast"
        assert data["data"]["ratio"] == 21.0

    def test_json_shortcut(self) -> None:
        data = json.loads(format_result(_ok("x"), json_output=True))
        assert data["op"] == "x"

    def test_json_error(self) -> None:
        data = json.loads(format_result(_err("compose", "boom"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["message"] == "boom"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok("x"), settings=settings))["ok"] is True

    def test_json_keeps_warnings(self) -> None:
        result = ServiceResult(ok=True, op="x", warnings=["careful"])
        assert json.loads(format_result(result, json_output=True))["warnings"] == ["careful"]


class TestFormatResultModes:
    def test_quiet_mode(self) -> None:
        settings = OutputSettings(quiet=True)
        output = format_result(_ok("select_layout", id="badge"), settings=settings)
        assert output == "OK: select_layout"

    def test_default_mode_is_rich(self) -> None:
        output = format_result(_ok("select_layout", brand="Nova", id="icon-top"))
        assert "OK" in output
        assert "icon-top" in output

    def test_verbose_includes_meta(self) -> None:
        result = ServiceResult(
            ok=True,
            op="unknown_op",
            meta={"telemetry": {"name": "Svc.run", "duration_ms": 2.0}},
        )
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "Svc.run" in output

    def test_width_is_applied(self) -> None:
        result = _ok("select_layout", description="wide " * 40)
        narrow = format_result(result, settings=OutputSettings(width=60))
        assert max(len(line) for line in narrow.splitlines()) <= 60
