"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from refgraph.services.result import ServiceResult
from refgraph.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_span() -> Generator[None]:
    yield
    _current_span.set(None)


# ── Span ─────────────────────────────────────────────────────────────


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_close(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.close()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.close()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_annotate(self) -> None:
        span = Span(name="traverse")
        span.annotate("visited", 42)
        assert span.to_dict()["annotations"] == {"visited": 42}


# ── trace_span ───────────────────────────────────────────────────────


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("test") as span:
            assert span is None

    def test_no_root_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("test") as span:
            assert span is None

    def test_child_attached_to_root(self) -> None:
        enable_telemetry()
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("child") as span:
                assert span is not None
            assert [c.name for c in root.children] == ["child"]
            assert root.children[0].finished is not None
        finally:
            _current_span.reset(token)


# ── @traced ──────────────────────────────────────────────────────────


class _Dummy:
    @traced
    def run(self) -> ServiceResult:
        with trace_span("step"):
            pass
        return ServiceResult(ok=True, op="run", meta={"keep": 1})

    @traced
    def plain(self) -> int:
        return 7


class TestTraced:
    def test_disabled_passthrough(self) -> None:
        result = _Dummy().run()
        assert result.meta == {"keep": 1}

    def test_enabled_attaches_telemetry(self) -> None:
        enable_telemetry()
        result = _Dummy().run()
        assert result.meta is not None
        assert result.meta["keep"] == 1
        telemetry = result.meta["telemetry"]
        assert telemetry["name"] == "_Dummy.run"
        assert [c["name"] for c in telemetry["children"]] == ["step"]

    def test_non_result_return_untouched(self) -> None:
        enable_telemetry()
        assert _Dummy().plain() == 7

    def test_disable(self) -> None:
        enable_telemetry()
        disable_telemetry()
        assert _Dummy().run().meta == {"keep": 1}
