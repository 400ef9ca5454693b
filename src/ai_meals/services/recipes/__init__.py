"""Recipe generation request pipeline.

Validation, preference normalization, orchestration, fallback detection and
error classification for the generate-recipes endpoint.
"""

from ai_meals.services.recipes.errors import ErrorClassification, classify_error
from ai_meals.services.recipes.fallback import is_fallback
from ai_meals.services.recipes.preferences import (
    ServicePreferences,
    normalize_preferences,
)
from ai_meals.services.recipes.service import (
    FilteredRecipes,
    RecipeGenerationService,
    is_valid_recipe,
)
from ai_meals.services.recipes.validation import (
    IngredientValidator,
    ValidationOutcome,
    sanitize_ingredient,
)


__all__ = [
    "ErrorClassification",
    "FilteredRecipes",
    "IngredientValidator",
    "RecipeGenerationService",
    "ServicePreferences",
    "ValidationOutcome",
    "classify_error",
    "is_fallback",
    "is_valid_recipe",
    "normalize_preferences",
    "sanitize_ingredient",
]
