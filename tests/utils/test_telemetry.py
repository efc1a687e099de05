"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from agentnet.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    _span_processors,
    ATTR_AGENT_COUNT,
    ATTR_COMPILE_SUCCESS,
    ATTR_DIAGNOSTIC_COUNT,
    ATTR_NETWORK_DIR,
    ATTR_NETWORK_NAME,
    ATTR_SKILL_COUNT,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans accept attributes silently."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("test") as span:
            span.set_attribute(ATTR_AGENT_COUNT, 2)


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )

    def test_console_processor_only(self) -> None:
        export = pytest.importorskip("opentelemetry.sdk.trace.export")

        processors = _span_processors(True, None)

        assert len(processors) == 1
        assert isinstance(processors[0], export.SimpleSpanProcessor)

    def test_no_processors(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace.export")
        assert _span_processors(False, None) == []


class TestAttributeConstants:
    def test_constants_are_namespaced(self) -> None:
        for attr in (
            ATTR_NETWORK_DIR,
            ATTR_NETWORK_NAME,
            ATTR_AGENT_COUNT,
            ATTR_SKILL_COUNT,
            ATTR_DIAGNOSTIC_COUNT,
            ATTR_COMPILE_SUCCESS,
        ):
            assert attr.startswith("agentnet.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "agentnet"
