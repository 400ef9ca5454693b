"""Enumerations shared by API schemas."""

from __future__ import annotations

from enum import StrEnum


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ReadinessStatus(StrEnum):
    """Readiness check status values."""

    READY = "ready"
    DEGRADED = "degraded"


class UsagePeriod(StrEnum):
    """Reporting window for token usage statistics."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
