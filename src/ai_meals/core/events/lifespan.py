"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: database pool, LLM client, generation services
- Application shutdown: close connections, flush spans
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from ai_meals.core.config import Settings, get_settings
from ai_meals.database.connection import close_database_pool, init_database_pool
from ai_meals.database.repositories.token_usage import TokenUsageRepository
from ai_meals.llm.client.openai import OpenAIClient
from ai_meals.observability.logging import get_logger, setup_logging
from ai_meals.observability.tracing import shutdown_tracing
from ai_meals.services.generation.generator import RecipeGenerator
from ai_meals.services.recipes.service import RecipeGenerationService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from ai_meals.llm.client.protocol import LLMClientProtocol

logger = get_logger(__name__)


# Container for global LLM client (avoids global statement)
class _LLMClientHolder:
    client: LLMClientProtocol | None = None


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    database_ready = await _init_database()

    # LLM client is optional; without it every request gets fallback recipes
    if settings.llm.enabled:
        try:
            await _init_llm_client(settings)
        except Exception:
            logger.exception(
                "Failed to initialize LLM client - serving fallback recipes"
            )
    else:
        logger.warning("LLM disabled - serving fallback recipes")

    generator = RecipeGenerator(
        llm_client=_LLMClientHolder.client,
        usage_repository=TokenUsageRepository() if database_ready else None,
    )
    app.state.llm_client = _LLMClientHolder.client
    app.state.recipe_generator = generator
    app.state.recipe_service = RecipeGenerationService(generator)

    logger.info("Application startup complete")


async def _init_database() -> bool:
    """Initialize the database pool; the app still starts without it."""
    try:
        await init_database_pool()
    except Exception:
        logger.exception(
            "Failed to initialize database - ingredient validation unavailable"
        )
        return False
    return True


async def _init_llm_client(settings: Settings) -> None:
    """Create and initialize the OpenAI client."""
    if not settings.OPENAI_API_KEY:
        logger.warning(
            "OPENAI_API_KEY not set - generation requests will fail "
            "with a configuration error"
        )

    openai = settings.llm.openai
    client = OpenAIClient(
        api_key=settings.OPENAI_API_KEY,
        model=openai.model,
        base_url=openai.url,
        timeout=openai.timeout,
        requests_per_minute=openai.requests_per_minute,
    )
    await client.initialize()
    _LLMClientHolder.client = client

    logger.info("LLM client initialized", model=openai.model, base_url=openai.url)


async def _shutdown_llm_client() -> None:
    """Shutdown the LLM client."""
    if _LLMClientHolder.client is not None:
        await _LLMClientHolder.client.shutdown()
        _LLMClientHolder.client = None
        logger.debug("LLM client shutdown")


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services."""
    logger.info("Shutting down application")

    app.state.recipe_service = None
    app.state.recipe_generator = None
    app.state.llm_client = None

    await _shutdown_llm_client()

    # Flush pending spans
    shutdown_tracing()

    await close_database_pool()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings = get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
