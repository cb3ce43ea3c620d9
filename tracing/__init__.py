"""Tracing package providing LangSmith and OpenTelemetry integration."""

from .langsmith_setup import (
    trace_llm_operation,
    trace_session_operation,
    tracer,
)
from .opentelemetry_setup import setup_tracing as setup_otel_tracing

__all__ = [
    "tracer",
    "trace_llm_operation",
    "trace_session_operation",
    "setup_otel_tracing",
]
