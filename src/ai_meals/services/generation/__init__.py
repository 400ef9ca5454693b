"""AI generation service package.

Wraps the LLM call that turns ingredients into recipes, including the canned
fallback used when the AI service is unavailable.
"""

from ai_meals.services.generation.fallback_recipes import (
    FALLBACK_RECIPE_DESCRIPTION,
    build_fallback_recipes,
)
from ai_meals.services.generation.generator import RecipeGenerator
from ai_meals.services.generation.models import GenerationResult


__all__ = [
    "FALLBACK_RECIPE_DESCRIPTION",
    "GenerationResult",
    "RecipeGenerator",
    "build_fallback_recipes",
]
