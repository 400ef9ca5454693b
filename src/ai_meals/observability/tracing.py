"""OpenTelemetry tracing configuration.

Instruments FastAPI request handling and exposes a tracer for manual spans
around the recipe generation call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from ai_meals.core.config import get_settings
from ai_meals.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from ai_meals.core.config import Settings

logger = get_logger(__name__)


def setup_tracing(app: FastAPI, settings: Settings | None = None) -> None:
    """Configure the tracer provider, exporter and FastAPI instrumentation.

    Spans go to the configured OTLP collector; in development without a
    collector they are printed to the console instead.
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.tracing.enabled:
        logger.info("Tracing disabled")
        return

    resource = Resource.create(
        {
            "service.name": settings.app.name.lower().replace(" ", "-"),
            "service.version": settings.app.version,
            "deployment.environment": settings.APP_ENV,
        }
    )
    provider = TracerProvider(resource=resource)

    endpoint = settings.observability.tracing.otlp_endpoint
    if endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        logger.info("OTLP trace exporter configured", endpoint=endpoint)
    elif settings.is_development:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console trace exporter configured (development mode)")

    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready,metrics")
    logger.info("OpenTelemetry tracing configured")


def shutdown_tracing() -> None:
    """Flush pending spans before the process exits."""
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()
        logger.info("Tracing shutdown complete")


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer for manual span creation."""
    return trace.get_tracer(name)


__all__ = ["get_tracer", "setup_tracing", "shutdown_tracing"]
