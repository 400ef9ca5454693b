"""AI recipe generation endpoint.

Provides:
- POST /ai-meals/generate-recipes for generating recipes from ingredients
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ai_meals.api.dependencies import get_ingredient_validator, get_recipe_service
from ai_meals.core.exceptions import (
    AppException,
    BadRequestException,
    GenerationFailedException,
)
from ai_meals.observability.logging import get_logger
from ai_meals.observability.metrics import record_generation_outcome
from ai_meals.schemas.recipe import GenerateRecipesRequest, GenerateRecipesResponse
from ai_meals.services.recipes.constants import FALLBACK_MESSAGE
from ai_meals.services.recipes.errors import classify_error
from ai_meals.services.recipes.fallback import is_fallback
from ai_meals.services.recipes.preferences import normalize_preferences
from ai_meals.services.recipes.service import RecipeGenerationService  # noqa: TC001
from ai_meals.services.recipes.validation import (
    IngredientValidator,  # noqa: TC001
    sanitize_ingredient,
)


logger = get_logger(__name__)

router = APIRouter(tags=["AI Meals"])

_ERROR_EXAMPLE: dict[str, Any] = {
    "application/json": {
        "example": {
            "success": False,
            "error": "Too many requests. Please wait a moment and try again.",
            "timestamp": "2025-01-01T12:00:00Z",
        }
    }
}


def _generation_failed(error: Exception) -> GenerationFailedException:
    """Classify a pipeline failure into the error the client sees."""
    classification = classify_error(error)
    logger.opt(exception=error).error(
        "Error generating recipes",
        status_code=classification.http_status,
        error_type=type(error).__name__,
    )
    record_generation_outcome("error")
    return GenerationFailedException(
        classification.http_status,
        classification.user_message,
    )


@router.post(
    "/ai-meals/generate-recipes",
    response_model=GenerateRecipesResponse,
    response_model_exclude_none=True,
    summary="Generate recipes from ingredients",
    description=(
        "Validates up to 10 known ingredients and asks the AI service for "
        "recipes that use them. When the AI service is unreachable, example "
        "recipes are returned and flagged with isFallbackRecipes."
    ),
    responses={
        400: {
            "description": "Invalid request or ingredient list",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": "Ingredient list contains duplicates",
                    }
                }
            },
        },
        429: {"description": "Rate limited", "content": _ERROR_EXAMPLE},
        500: {"description": "Generation failed"},
        503: {"description": "AI service credit limits reached"},
    },
)
async def generate_recipes(
    request: Request,
    validator: Annotated[IngredientValidator, Depends(get_ingredient_validator)],
    service: Annotated[RecipeGenerationService, Depends(get_recipe_service)],
) -> GenerateRecipesResponse:
    """Generate recipes for the submitted ingredients.

    The body is read raw so that a non-array ``ingredients`` value is
    reported by the ingredient validator rather than by request parsing.

    Raises:
        BadRequestException: 400 if the body shape or ingredients are invalid.
        GenerationFailedException: 429/500/503 if generation fails.
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise _generation_failed(e) from e

    try:
        payload = GenerateRecipesRequest.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.info("Rejected malformed generate request", error=message)
        record_generation_outcome("rejected")
        raise BadRequestException(message) from e

    try:
        validation = await validator.validate(payload.ingredients)
        if not validation.is_valid:
            record_generation_outcome("rejected")
            raise BadRequestException(validation.error or "Invalid ingredients")

        sanitized = [sanitize_ingredient(item) for item in payload.ingredients]
        preferences = normalize_preferences(payload.preferences)

        logger.info(
            "Generating recipes",
            ingredient_count=len(sanitized),
            has_preferences=payload.preferences is not None,
            preferences=dict(preferences),
        )

        filtered = await service.generate(sanitized, preferences)
    except AppException:
        raise
    except Exception as e:
        raise _generation_failed(e) from e

    fallback = is_fallback(filtered.recipes)
    record_generation_outcome("fallback" if fallback else "success")

    return GenerateRecipesResponse(
        recipes=filtered.recipes,
        ingredients=sanitized,
        is_fallback_recipes=fallback,
        message=FALLBACK_MESSAGE if fallback else None,
    )

