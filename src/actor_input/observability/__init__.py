"""
observability/__init__.py

PURPOSE: OpenTelemetry tracing for the scenario harness.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
Tracing is opt-in:
- No-op tracer until init_telemetry() runs with tracing enabled
- Console output by default when enabled
- OTLP export when endpoint is configured
"""

from actor_input.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
