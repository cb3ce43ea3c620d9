"""OpenTelemetry tracing setup for the DevMind agent."""

from __future__ import annotations

import os
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from opentelemetry import trace as trace_mod


# Global tracer instance used across the application
otel_tracer: Optional["trace_mod.Tracer"] = None


def setup_tracing(service_name: str = "devmind-agent") -> Optional["trace_mod.Tracer"]:
    """Configure OpenTelemetry tracing with an OTLP exporter.

    Tracing stays off unless ``OTEL_EXPORTER_OTLP_ENDPOINT`` is set and the
    OpenTelemetry SDK is installed; in that case ``None`` is returned.
    """

    global otel_tracer

    otlp_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not otlp_endpoint:
        otel_tracer = None
        return None

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import SERVICE_NAME, Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )
    except ImportError:  # pragma: no cover - missing optional dependency
        otel_tracer = None
        return None

    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    otel_tracer = trace.get_tracer(service_name)
    return otel_tracer


__all__ = ["setup_tracing", "otel_tracer"]
