"""OpenTelemetry tracing for the loader and compiler.

Spans are always created through the OpenTelemetry API, which hands out
no-op tracers until an SDK provider is installed.  The CLI installs one with
:func:`configure_telemetry` when ``--trace`` or ``--otlp-endpoint`` is given
(requires the ``otel`` extra: ``pip install agentnet[otel]``)::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("agentnet.compile") as span:
        span.set_attribute(ATTR_AGENT_COUNT, 3)
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys used by the loader and compiler spans
# ---------------------------------------------------------------------------

ATTR_NETWORK_DIR = "agentnet.network.dir"
ATTR_NETWORK_NAME = "agentnet.network.name"
ATTR_AGENT_COUNT = "agentnet.agents.count"
ATTR_SKILL_COUNT = "agentnet.skills.count"
ATTR_DIAGNOSTIC_COUNT = "agentnet.diagnostics.count"
ATTR_COMPILE_SUCCESS = "agentnet.compile.success"

_INSTRUMENTATION_NAME = "agentnet"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "agentnet",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider so loader and compiler spans are exported.

    Spans go to stdout when *export_to_console* is set and to an OTLP/gRPC
    collector when *otlp_endpoint* is given.  Requires ``agentnet[otel]``.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, for OTLP export,
            ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for tracing. "
            "Install it with: pip install agentnet[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(export_to_console, otlp_endpoint):
        provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)


def _span_processors(export_to_console: bool, otlp_endpoint: str | None) -> list[Any]:
    from opentelemetry.sdk.trace.export import (
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter()))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError as exc:
            msg = (
                "opentelemetry-exporter-otlp is required for OTLP export. "
                "Install it with: pip install agentnet[otel]"
            )
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    return processors
