"""Pydantic schemas for request/response validation."""

from ai_meals.schemas.base import APIRequest, APIResponse
from ai_meals.schemas.enums import HealthStatus, ReadinessStatus, UsagePeriod
from ai_meals.schemas.health import HealthResponse, ReadinessResponse
from ai_meals.schemas.ingredient import IngredientItem, IngredientListResponse
from ai_meals.schemas.recipe import (
    GenerateRecipesRequest,
    GenerateRecipesResponse,
    RecipePreferencesInput,
)
from ai_meals.schemas.token_usage import (
    RecentTokenUsageResponse,
    TokenUsageStatsResponse,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "GenerateRecipesRequest",
    "GenerateRecipesResponse",
    "HealthResponse",
    "HealthStatus",
    "IngredientItem",
    "IngredientListResponse",
    "ReadinessResponse",
    "ReadinessStatus",
    "RecentTokenUsageResponse",
    "RecipePreferencesInput",
    "TokenUsageStatsResponse",
    "UsagePeriod",
]
