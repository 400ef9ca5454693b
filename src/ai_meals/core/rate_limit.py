"""Rate limiting using SlowAPI.

A single limiter keyed by client address guards the API. Storage defaults to
in-process memory; point ``rate_limiting.storage_uri`` at a shared backend
when running more than one worker.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from ai_meals.core.config import get_settings
from ai_meals.core.exceptions import error_response
from ai_meals.core.middleware.logging import get_client_ip
from ai_meals.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI
    from fastapi.responses import ORJSONResponse
    from starlette.requests import Request

    from ai_meals.core.config import Settings

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests. Please wait a moment and try again."


def create_limiter(settings: Settings | None = None) -> Limiter:
    """Create the limiter from the ``rate_limiting`` settings section."""
    if settings is None:
        settings = get_settings()

    return Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limiting.default],
        storage_uri=settings.rate_limiting.storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limiting.enabled,
    )


limiter = create_limiter()


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """Render a rate limit rejection in the API error envelope."""
    assert isinstance(exc, RateLimitExceeded)
    logger.warning(
        "Rate limit exceeded",
        path=request.url.path,
        client_ip=get_client_ip(request),
        limit=str(exc.detail),
    )
    response = error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        RATE_LIMIT_MESSAGE,
        include_timestamp=False,
    )
    response.headers["Retry-After"] = "60"
    return response


def setup_rate_limiting(app: FastAPI) -> None:
    """Attach the limiter to the app and register its error handler."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
