"""Observability components: logging, metrics, and tracing."""

from ai_meals.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    logger,
    setup_logging,
)
from ai_meals.observability.metrics import (
    record_dropped_recipes,
    record_generation_outcome,
    setup_metrics,
)
from ai_meals.observability.tracing import get_tracer, setup_tracing, shutdown_tracing


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "get_tracer",
    "logger",
    "record_dropped_recipes",
    "record_generation_outcome",
    "setup_logging",
    "setup_metrics",
    "setup_tracing",
    "shutdown_tracing",
]
