"""Database repositories."""

from ai_meals.database.repositories.ingredient import (
    IngredientRecord,
    IngredientRepository,
)
from ai_meals.database.repositories.token_usage import (
    TokenUsageRecord,
    TokenUsageRepository,
)


__all__ = [
    "IngredientRecord",
    "IngredientRepository",
    "TokenUsageRecord",
    "TokenUsageRepository",
]
