"""Recipe generation prompt.

Defines the prompt and output schema for generating recipes from a short
list of user-supplied ingredients and optional preferences.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import BasePrompt


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionalInfo(_CamelModel):
    """Per-serving nutrition estimate."""

    calories: int
    protein: str
    carbs: str
    fat: str


class GeneratedRecipe(_CamelModel):
    """A single recipe as requested from the LLM."""

    name: str
    description: str
    tags: list[str]
    ingredients: list[str]
    instructions: list[str]
    prep_time: str
    difficulty: str
    servings: int
    nutritional_info: NutritionalInfo


class RecipeSuggestions(_CamelModel):
    """Extra ideas returned alongside the recipes."""

    additional_ingredients: list[str]
    cooking_tips: list[str]
    substitutions: list[str]


class RecipeGenerationOutput(_CamelModel):
    """Output schema for recipe generation.

    Only used to describe the expected JSON to the model. The decoded output
    is handed on as plain data and filtered downstream, so a partially
    malformed response still yields its usable recipes.
    """

    recipes: list[GeneratedRecipe] = Field(..., description="Generated recipes")
    suggestions: RecipeSuggestions


REQUIREMENTS = """Requirements:
- Each recipe should be practical and achievable
- Include realistic preparation times and difficulty levels
- Provide accurate nutritional information
- Include helpful cooking tips and ingredient substitutions
- Ensure recipes are diverse and interesting
- Use the provided ingredients as the main components
- Add common pantry staples if needed for complete recipes"""


class RecipeGenerationPrompt(BasePrompt[RecipeGenerationOutput]):
    """Prompt for generating recipes from available ingredients.

    Example input:
        ingredients=["chicken", "rice"],
        preferences={"dietary": ["gluten-free"], "max_time": "30 minutes"}
    """

    output_schema: ClassVar[type[BaseModel]] = RecipeGenerationOutput

    system_prompt: ClassVar[str | None] = (
        "You are a culinary expert and recipe generator. You create delicious, "
        "practical recipes based on available ingredients. Always provide "
        "accurate cooking instructions and realistic preparation times. "
        "Consider dietary restrictions and preferences when generating recipes."
    )

    temperature: ClassVar[float] = 0.7
    max_tokens: ClassVar[int | None] = 2000

    recipe_count: ClassVar[int] = 3

    def format(self, **kwargs: Any) -> str:
        """Format the prompt with ingredients and preferences.

        Args:
            **kwargs: Must contain 'ingredients'. May contain 'preferences',
                a mapping with any of dietary, cuisine, difficulty, max_time.

        Returns:
            Formatted prompt string.

        Raises:
            ValueError: If 'ingredients' is missing or empty.
        """
        ingredients = kwargs.get("ingredients")
        if not ingredients:
            msg = "Missing required 'ingredients' argument"
            raise ValueError(msg)

        preferences = kwargs.get("preferences") or {}

        lines = [
            f"Generate {self.recipe_count} delicious recipes using these "
            f"ingredients: {', '.join(ingredients)}.",
            "",
        ]

        dietary = preferences.get("dietary")
        if dietary:
            lines.append(f"Dietary preferences: {', '.join(dietary)}")
        if preferences.get("cuisine"):
            lines.append(f"Cuisine preference: {preferences['cuisine']}")
        if preferences.get("difficulty"):
            lines.append(f"Difficulty level: {preferences['difficulty']}")
        if preferences.get("max_time"):
            lines.append(f"Maximum prep time: {preferences['max_time']}")

        lines.extend(["", REQUIREMENTS])
        return "\n".join(lines)
