"""Ingredient endpoints.

Provides:
- GET /ingredients/search for prefix search over active ingredients
- GET /ingredients/random for a handful of random active ingredients
"""

from __future__ import annotations

import random
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from ai_meals.api.dependencies import get_ingredient_repository
from ai_meals.core.config import Settings, get_settings
from ai_meals.core.exceptions import AppException
from ai_meals.database.repositories.ingredient import IngredientRepository  # noqa: TC001
from ai_meals.observability.logging import get_logger
from ai_meals.schemas.ingredient import IngredientItem, IngredientListResponse


logger = get_logger(__name__)

router = APIRouter(tags=["Ingredients"])


@router.get(
    "/ingredients/search",
    response_model=IngredientListResponse,
    summary="Search ingredients by name prefix",
    description=(
        "Case-insensitive prefix search over active ingredients, ordered by "
        "name. Optionally restricted to a single category."
    ),
)
async def search_ingredients(
    repository: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
    q: Annotated[
        str,
        Query(min_length=1, max_length=100, description="Name prefix"),
    ],
    limit: Annotated[
        int,
        Query(ge=1, le=50, description="Maximum results"),
    ] = 10,
    category: Annotated[
        str | None,
        Query(max_length=50, description="Restrict to this category"),
    ] = None,
) -> IngredientListResponse:
    """Search active ingredients whose name starts with ``q``.

    Raises:
        AppException: 500 if the ingredient store fails.
    """
    term = q.strip()
    if not term:
        return IngredientListResponse(ingredients=[])

    try:
        records = await repository.search(term, limit=limit, category=category)
    except Exception as e:
        logger.opt(exception=e).error("Error searching ingredients", query=term)
        raise AppException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to search ingredients",
        ) from e

    return IngredientListResponse(
        ingredients=[IngredientItem(**record.model_dump()) for record in records],
    )


@router.get(
    "/ingredients/random",
    response_model=IngredientListResponse,
    summary="Random ingredient suggestions",
)
async def random_ingredients(
    repository: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IngredientListResponse:
    """Return a few random active ingredients to seed the ingredient picker.

    Raises:
        AppException: 500 if the ingredient store fails.
    """
    count = random.randint(  # noqa: S311
        settings.recipes.random_min,
        max(settings.recipes.random_min, settings.recipes.random_max),
    )

    try:
        records = await repository.get_random(count)
    except Exception as e:
        logger.opt(exception=e).error("Error fetching random ingredients")
        raise AppException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to fetch random ingredients",
        ) from e

    return IngredientListResponse(
        ingredients=[IngredientItem(**record.model_dump()) for record in records],
    )
