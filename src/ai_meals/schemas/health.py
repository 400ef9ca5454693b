"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from ai_meals.schemas.enums import HealthStatus, ReadinessStatus


class HealthResponse(BaseModel):
    """Liveness response."""

    status: HealthStatus = Field(..., description="Health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    uptime_seconds: int = Field(..., description="Seconds since startup")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(BaseModel):
    """Readiness response with dependency status."""

    status: ReadinessStatus = Field(..., description="Readiness status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of external dependencies",
    )
