"""Tests for the format_result dispatcher and OutputSettings."""

import json

from refgraph.output.formatters import OutputSettings, format_result
from refgraph.services.result import ServiceError, ServiceResult


def _ok(op: str = "extract", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "extract", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok(node_count=3), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "extract"
        assert data["data"]["node_count"] == 3

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True


class TestFormatResultQuiet:
    def test_quiet_lists_node_ids(self) -> None:
        result = _ok(nodes=[{"id": 1}, {"id": 2}])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1\n2"

    def test_quiet_without_nodes(self) -> None:
        result = _ok("inspect", node_count=3)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: inspect"

    def test_quiet_error(self) -> None:
        output = format_result(_err(msg="Bad input"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: extract")
        assert "Bad input" in output


class TestFormatResultHuman:
    def test_default_is_rich_text(self) -> None:
        output = format_result(_ok(node_count=3))
        assert output.startswith("OK")
        assert "node_count: 3" in output
