"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest
from structlog.testing import capture_logs

from modeldeco.domain.registry import ModelRegistry
from modeldeco.services.decorate import decorate_models
from modeldeco.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)
from tests.conftest import make_command, make_command_set


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()
    _current_span.set(None)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_nested(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.annotate("decorated", 3)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["name"] == "root"
        assert "annotations" not in d
        assert d["children"][0]["annotations"] == {"decorated": 3}


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_enabled_without_root_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("x") as span:
            assert span is None

    def test_nested_under_traced(self) -> None:
        enable_telemetry()

        @traced
        def work() -> str | None:
            with trace_span("inner") as span:
                assert span is not None
                current = get_current_span()
                return current.name if current else None

        with capture_logs() as logs:
            assert work() == "inner"
        assert logs[0]["event"] == "span.complete"
        assert logs[0]["children"][0]["name"] == "inner"


class TestTraced:
    def test_disabled_is_passthrough(self) -> None:
        @traced
        def work(x: int) -> int:
            return x * 2

        with capture_logs() as logs:
            assert work(2) == 4
        assert logs == []

    def test_failure_logged_and_raised(self) -> None:
        enable_telemetry()

        @traced
        def boom() -> None:
            raise ValueError("nope")

        with capture_logs() as logs, pytest.raises(ValueError):
            boom()
        assert logs[0]["ok"] is False
        assert get_current_span() is None

    def test_decorate_phases(self, foo_registry: ModelRegistry) -> None:
        enable_telemetry()
        doc = make_command_set(make_command("A", declaration="Foo"))
        with capture_logs() as logs:
            decorate_models(foo_registry, doc)
        spans = [entry for entry in logs if entry["event"] == "span.complete"]
        assert len(spans) == 1
        assert spans[0]["ok"] is True
        assert [c["name"] for c in spans[0]["children"]] == [
            "validate",
            "clone",
            "apply",
            "rebuild",
        ]
        assert spans[0]["children"][2]["annotations"] == {"decorated": 1}
