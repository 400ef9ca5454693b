"""Ingredient lookup response schemas."""

from __future__ import annotations

from pydantic import Field

from ai_meals.schemas.base import APIResponse


class IngredientItem(APIResponse):
    """Single ingredient from the reference store."""

    id: int = Field(..., description="Ingredient identifier")
    name: str = Field(..., description="Lower-cased ingredient name")
    category: str | None = Field(default=None, description="Ingredient category")


class IngredientListResponse(APIResponse):
    """List of ingredients."""

    success: bool = Field(default=True)
    ingredients: list[IngredientItem] = Field(default_factory=list)
