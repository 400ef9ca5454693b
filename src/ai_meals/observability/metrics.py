"""Prometheus metrics instrumentation.

This module provides:
- FastAPI automatic request metrics
- Recipe generation counters (outcomes and dropped recipes)
- The metrics endpoint under the API prefix
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from ai_meals.core.config import get_settings
from ai_meals.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from ai_meals.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "ai_meals"

RECIPE_GENERATIONS = Counter(
    "recipe_generations_total",
    "Recipe generation requests by outcome (success, fallback, rejected, error).",
    labelnames=("outcome",),
    namespace=METRIC_NAMESPACE,
)

RECIPES_DROPPED = Counter(
    "recipes_dropped_total",
    "Recipes returned by the AI service that failed structural validation.",
    namespace=METRIC_NAMESPACE,
)


def record_generation_outcome(outcome: str) -> None:
    """Count one generation request with the given outcome label."""
    RECIPE_GENERATIONS.labels(outcome=outcome).inc()


def record_dropped_recipes(count: int) -> None:
    """Count recipes silently removed from an AI response."""
    if count > 0:
        RECIPES_DROPPED.inc(count)


def setup_metrics(app: FastAPI, settings: Settings | None = None) -> Instrumentator:
    """Configure Prometheus HTTP metrics and expose ``{prefix}/metrics``.

    Args:
        app: The FastAPI application instance.
        settings: Optional settings override.

    Returns:
        The configured Instrumentator (unattached when metrics are disabled).
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    prefix = settings.api.v1_prefix

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/ready",
            f"{prefix}/metrics",
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    instrumentator.instrument(app)

    metrics_endpoint = f"{prefix}/metrics"
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )
    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)

    return instrumentator


__all__ = [
    "RECIPES_DROPPED",
    "RECIPE_GENERATIONS",
    "record_dropped_recipes",
    "record_generation_outcome",
    "setup_metrics",
]
