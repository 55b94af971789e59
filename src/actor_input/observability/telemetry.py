"""
telemetry.py

PURPOSE: OpenTelemetry initialization and tracer management.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (optional)

ARCHITECTURE NOTES:
Modules call get_tracer(__name__) at import time. The API tracer is a no-op
until init_telemetry() installs an SDK provider, so tracing costs nothing
unless it is enabled in settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

if TYPE_CHECKING:
    from actor_input.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

# Provider installed by init_telemetry, if any
_tracer_provider: TracerProvider | None = None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Initialize OpenTelemetry tracing.

    Should be called once at application startup; later calls are ignored.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _tracer_provider

    if _tracer_provider is not None:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return

    resource = Resource.create({"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)

    # Console exporter is always on when tracing is enabled
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning(
                "OTLP exporter not installed, using console only. "
                "Install with: pip install actor-input[otlp]"
            )
        else:
            provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.endpoint))
            )
            logger.info(f"OTLP exporter configured: {settings.endpoint}")

    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(f"Telemetry initialized: service={settings.service_name}")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for the given module name.

    The returned proxy tracer picks up the provider installed later by
    init_telemetry(), so it is safe to call at import time.

    Args:
        name: Module name (typically __name__).
    """
    return trace.get_tracer(name)


def shutdown_telemetry() -> None:
    """
    Shutdown the tracer provider, flushing any pending spans.

    Safe to call even if telemetry was never initialized.
    """
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.debug("Telemetry shutdown complete")

    _tracer_provider = None
