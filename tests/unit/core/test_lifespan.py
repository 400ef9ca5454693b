"""Unit tests for lifespan events.

Tests cover:
- Startup wiring of the generation services
- Degraded startup without a database or LLM
- Shutdown sequence
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ai_meals.core.events.lifespan import (
    _init_llm_client,
    _LLMClientHolder,
    _shutdown_llm_client,
    lifespan,
)
from ai_meals.services.recipes.service import RecipeGenerationService


pytestmark = pytest.mark.unit

MODULE = "ai_meals.core.events.lifespan"


def _create_mock_settings(
    *,
    llm_enabled: bool = True,
    api_key: str = "sk-test",
) -> MagicMock:
    """Create mock settings with nested structure for tests."""
    mock_settings = MagicMock()
    mock_settings.app.name = "test-app"
    mock_settings.app.debug = False
    mock_settings.APP_ENV = "test"
    mock_settings.logging.level = "INFO"
    mock_settings.logging.format = "json"
    mock_settings.is_development = False
    mock_settings.llm.enabled = llm_enabled
    mock_settings.llm.openai.url = "https://api.openai.com/v1"
    mock_settings.llm.openai.model = "gpt-4o-mini"
    mock_settings.llm.openai.timeout = 60.0
    mock_settings.llm.openai.requests_per_minute = 60.0
    mock_settings.OPENAI_API_KEY = api_key
    return mock_settings


@pytest.fixture(autouse=True)
def _reset_llm_holder() -> None:
    _LLMClientHolder.client = None


def _app() -> MagicMock:
    app = MagicMock()
    app.state = SimpleNamespace()
    return app


class TestLifespan:
    """Tests for the lifespan context manager."""

    async def test_startup_wires_services(self) -> None:
        app = _app()
        with (
            patch(f"{MODULE}.get_settings", return_value=_create_mock_settings()),
            patch(f"{MODULE}.setup_logging") as mock_logging,
            patch(f"{MODULE}.init_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.close_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.shutdown_tracing"),
        ):
            async with lifespan(app):
                mock_logging.assert_called_once()
                assert app.state.llm_client is not None
                assert app.state.llm_client.model == "gpt-4o-mini"
                assert isinstance(app.state.recipe_service, RecipeGenerationService)
                assert app.state.recipe_generator._usage_repository is not None

        assert app.state.recipe_service is None
        assert app.state.llm_client is None

    async def test_starts_without_database(self) -> None:
        app = _app()
        with (
            patch(f"{MODULE}.get_settings", return_value=_create_mock_settings()),
            patch(f"{MODULE}.setup_logging"),
            patch(
                f"{MODULE}.init_database_pool",
                new_callable=AsyncMock,
                side_effect=OSError("connection refused"),
            ),
            patch(f"{MODULE}.close_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.shutdown_tracing"),
        ):
            async with lifespan(app):
                assert app.state.recipe_service is not None
                assert app.state.recipe_generator._usage_repository is None

    async def test_llm_disabled_leaves_client_unset(self) -> None:
        app = _app()
        with (
            patch(
                f"{MODULE}.get_settings",
                return_value=_create_mock_settings(llm_enabled=False),
            ),
            patch(f"{MODULE}.setup_logging"),
            patch(f"{MODULE}.init_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.close_database_pool", new_callable=AsyncMock),
            patch(f"{MODULE}.shutdown_tracing"),
        ):
            async with lifespan(app):
                assert app.state.llm_client is None
                assert app.state.recipe_generator._llm_client is None

    async def test_shutdown_closes_resources(self) -> None:
        app = _app()
        with (
            patch(f"{MODULE}.get_settings", return_value=_create_mock_settings()),
            patch(f"{MODULE}.setup_logging"),
            patch(f"{MODULE}.init_database_pool", new_callable=AsyncMock),
            patch(
                f"{MODULE}.close_database_pool", new_callable=AsyncMock
            ) as mock_close,
            patch(f"{MODULE}.shutdown_tracing") as mock_tracing,
        ):
            async with lifespan(app):
                pass

        mock_close.assert_awaited_once()
        mock_tracing.assert_called_once()
        assert _LLMClientHolder.client is None


class TestLLMClient:
    """Tests for LLM client initialization and shutdown."""

    async def test_init_without_key_still_creates_client(self) -> None:
        await _init_llm_client(_create_mock_settings(api_key=""))

        assert _LLMClientHolder.client is not None
        await _shutdown_llm_client()

    async def test_shutdown_is_idempotent(self) -> None:
        await _shutdown_llm_client()

        assert _LLMClientHolder.client is None
