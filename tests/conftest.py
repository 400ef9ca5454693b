"""Shared test fixtures for the AI Meals service tests.

Selects the ``test`` configuration environment before any application module
is imported, and provides an application wired to in-memory collaborators.
"""

from __future__ import annotations

import os


os.environ["APP_ENV"] = "test"

import copy  # noqa: E402
from typing import TYPE_CHECKING, Any  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from ai_meals.api.dependencies import (  # noqa: E402
    get_ingredient_repository,
    get_recipe_service,
    get_token_usage_repository,
)
from ai_meals.core.config import Settings, get_settings  # noqa: E402
from ai_meals.database.repositories.ingredient import IngredientRecord  # noqa: E402
from ai_meals.database.repositories.token_usage import TokenUsageStats  # noqa: E402
from ai_meals.factory import create_app  # noqa: E402
from ai_meals.services.recipes.service import RecipeGenerationService  # noqa: E402
from tests.fixtures.openai_responses import SAMPLE_RECIPES  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


KNOWN_INGREDIENTS: dict[str, str] = {
    "tomato": "vegetable",
    "basil": "herb",
    "garlic": "vegetable",
    "chicken": "protein",
    "rice": "grain",
    "onion": "vegetable",
    "carrot": "vegetable",
    "potato": "vegetable",
    "egg": "protein",
    "cheese": "dairy",
    "spinach": "vegetable",
    "mushroom": "vegetable",
}


@pytest.fixture
def settings() -> Settings:
    """Settings for the test environment."""
    return get_settings()


@pytest.fixture
def ingredient_store() -> MagicMock:
    """In-memory ingredient store with a fixed set of active ingredients."""

    def _lookup(name: str) -> IngredientRecord | None:
        if name not in KNOWN_INGREDIENTS:
            return None
        return IngredientRecord(
            id=list(KNOWN_INGREDIENTS).index(name) + 1,
            name=name,
            category=KNOWN_INGREDIENTS[name],
        )

    store = MagicMock()
    store.find_active_by_name = AsyncMock(side_effect=_lookup)
    store.search = AsyncMock(return_value=[])
    store.get_random = AsyncMock(return_value=[])
    return store


@pytest.fixture
def usage_store() -> MagicMock:
    """Token usage store with no recorded calls."""
    store = MagicMock()
    store.record = AsyncMock()
    store.get_stats = AsyncMock(return_value=TokenUsageStats())
    store.get_recent = AsyncMock(return_value=[])
    return store


@pytest.fixture
def generation_result() -> dict[str, Any]:
    """A fresh copy of a well-formed generation result."""
    return copy.deepcopy(SAMPLE_RECIPES)


@pytest.fixture
def recipe_generator(generation_result: dict[str, Any]) -> MagicMock:
    """Mock recipe generator returning the sample recipes."""
    generator = MagicMock()
    generator.generate_recipes = AsyncMock(return_value=generation_result)
    return generator


@pytest.fixture
def app(
    settings: Settings,
    ingredient_store: MagicMock,
    recipe_generator: MagicMock,
    usage_store: MagicMock,
) -> FastAPI:
    """Application with store and generator replaced by mocks."""
    application = create_app(settings)
    service = RecipeGenerationService(recipe_generator)
    application.dependency_overrides[get_ingredient_repository] = (
        lambda: ingredient_store
    )
    application.dependency_overrides[get_recipe_service] = lambda: service
    application.dependency_overrides[get_token_usage_repository] = lambda: usage_store
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    """HTTP client talking to the app in-process (lifespan not run)."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
