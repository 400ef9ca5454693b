"""Prompt definitions for LLM calls."""

from ai_meals.llm.prompts.base import BasePrompt
from ai_meals.llm.prompts.recipe_generation import (
    GeneratedRecipe,
    NutritionalInfo,
    RecipeGenerationOutput,
    RecipeGenerationPrompt,
    RecipeSuggestions,
)


__all__ = [
    "BasePrompt",
    "GeneratedRecipe",
    "NutritionalInfo",
    "RecipeGenerationOutput",
    "RecipeGenerationPrompt",
    "RecipeSuggestions",
]
