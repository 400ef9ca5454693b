"""PostgreSQL data access: connection pool and repositories."""

from ai_meals.database.connection import (
    check_database_health,
    close_database_pool,
    get_database_pool,
    init_database_pool,
)
from ai_meals.database.repositories import (
    IngredientRecord,
    IngredientRepository,
    TokenUsageRecord,
    TokenUsageRepository,
)


__all__ = [
    "IngredientRecord",
    "IngredientRepository",
    "TokenUsageRecord",
    "TokenUsageRepository",
    "check_database_health",
    "close_database_pool",
    "get_database_pool",
    "init_database_pool",
]
