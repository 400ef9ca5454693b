"""Health check endpoints.

Provides liveness and readiness checks for Kubernetes and load balancers.
"""

from __future__ import annotations

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from ai_meals.core.config import Settings, get_settings
from ai_meals.database.connection import check_database_health
from ai_meals.schemas.enums import HealthStatus, ReadinessStatus
from ai_meals.schemas.health import HealthResponse, ReadinessResponse


router = APIRouter(tags=["health"])

_PROCESS_STARTED = time.monotonic()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive.

    Does not check external dependencies.
    """
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        uptime_seconds=int(time.monotonic() - _PROCESS_STARTED),
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Readiness check verifying all dependencies are available.",
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReadinessResponse:
    """Check if the service is ready to handle requests.

    The database is required; a missing AI client only means fallback
    recipes will be served, so it is reported but does not degrade.
    """
    dependencies = await check_database_health()
    dependencies["llm"] = (
        "configured"
        if getattr(request.app.state, "llm_client", None) is not None
        else "not_configured"
    )

    ready = dependencies["database"] == HealthStatus.HEALTHY
    return ReadinessResponse(
        status=ReadinessStatus.READY if ready else ReadinessStatus.DEGRADED,
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
