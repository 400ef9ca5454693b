"""Recipe generation request and response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ai_meals.schemas.base import APIRequest, APIResponse


class RecipePreferencesInput(APIRequest):
    """Optional user preferences for generation.

    Every field is optional; only supplied fields are passed on.
    """

    dietary: str | None = Field(default=None, description="e.g. vegetarian")
    cuisine: str | None = Field(default=None, description="e.g. Italian")
    difficulty: str | None = Field(default=None, description="e.g. Easy")
    max_time: str | None = Field(default=None, description="e.g. 30 minutes")


class GenerateRecipesRequest(APIRequest):
    """Body of a generate-recipes request.

    ``ingredients`` is accepted as-is and checked by the ingredient
    validator, which reports problems with messages of its own.
    """

    ingredients: Any = Field(default=None, description="Ingredient names")
    preferences: RecipePreferencesInput | None = Field(
        default=None,
        description="Optional generation preferences",
    )


class GenerateRecipesResponse(APIResponse):
    """Successful generation response."""

    success: bool = Field(default=True)
    recipes: list[dict[str, Any]] = Field(..., description="Valid recipes")
    ingredients: list[str] = Field(..., description="Sanitized ingredients used")
    is_fallback_recipes: bool = Field(
        ...,
        description="True when the AI service was unavailable",
    )
    message: str | None = Field(
        default=None,
        description="Explanation shown with fallback recipes",
    )
