"""FastAPI dependencies for service access.

Services are created during application startup and stored in app.state;
repositories are cheap and built per request on top of the shared pool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request

from ai_meals.core.config import Settings, get_settings
from ai_meals.core.exceptions import ServiceUnavailableException
from ai_meals.database.repositories.ingredient import IngredientRepository
from ai_meals.database.repositories.token_usage import TokenUsageRepository
from ai_meals.services.recipes.validation import IngredientValidator


if TYPE_CHECKING:
    from ai_meals.services.recipes.service import RecipeGenerationService


async def get_recipe_service(request: Request) -> RecipeGenerationService:
    """Get the recipe generation service from app state.

    Raises:
        ServiceUnavailableException: 503 if the service is not initialized.
    """
    service: RecipeGenerationService | None = getattr(
        request.app.state, "recipe_service", None
    )
    if service is None:
        raise ServiceUnavailableException("Recipe generation service not available")
    return service


async def get_ingredient_repository() -> IngredientRepository:
    """Get an ingredient repository bound to the application pool."""
    return IngredientRepository()


async def get_ingredient_validator(
    repository: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IngredientValidator:
    """Get an ingredient validator configured from the recipes settings."""
    return IngredientValidator(
        repository,
        max_ingredients=settings.recipes.max_ingredients,
        max_ingredient_length=settings.recipes.max_ingredient_length,
    )


async def get_token_usage_repository() -> TokenUsageRepository:
    """Get a token usage repository bound to the application pool."""
    return TokenUsageRepository()
