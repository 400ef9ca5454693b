"""Recipe generation orchestration.

Calls the generator once with sanitized inputs and keeps only the recipes
that are structurally usable. Nothing is retried; generator errors propagate
to the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from ai_meals.observability.logging import get_logger
from ai_meals.observability.metrics import record_dropped_recipes
from ai_meals.observability.tracing import get_tracer


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ai_meals.services.generation.models import GenerationResult

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class RecipeSource(Protocol):
    """Anything that can produce raw recipes for ingredients."""

    async def generate_recipes(
        self,
        ingredients: Sequence[str],
        preferences: Mapping[str, Any] | None = None,
    ) -> GenerationResult: ...


@dataclass
class FilteredRecipes:
    """Recipes that passed the structural filter, with counts."""

    recipes: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0

    @property
    def dropped(self) -> int:
        return self.total - len(self.recipes)


def is_valid_recipe(recipe: Any) -> bool:
    """A recipe is usable when it has a name, description, ingredients and steps.

    Name and description must be non-empty strings, not merely truthy.
    """
    if not isinstance(recipe, dict):
        return False
    name = recipe.get("name")
    description = recipe.get("description")
    return (
        isinstance(name, str)
        and bool(name)
        and isinstance(description, str)
        and bool(description)
        and isinstance(recipe.get("ingredients"), list)
        and isinstance(recipe.get("instructions"), list)
    )


class RecipeGenerationService:
    """Runs one generation call and filters its output."""

    def __init__(self, generator: RecipeSource) -> None:
        self._generator = generator

    async def generate(
        self,
        ingredients: Sequence[str],
        preferences: Mapping[str, Any],
    ) -> FilteredRecipes:
        """Generate recipes and drop the malformed ones.

        Args:
            ingredients: Sanitized ingredient names.
            preferences: Normalized service preferences.

        Returns:
            FilteredRecipes holding only valid recipes, in original order.
        """
        with tracer.start_as_current_span("recipes.generate") as span:
            span.set_attribute("recipes.ingredient_count", len(ingredients))
            result = await self._generator.generate_recipes(ingredients, preferences)

            raw = result.get("recipes") or []
            filtered = FilteredRecipes(
                recipes=[recipe for recipe in raw if is_valid_recipe(recipe)],
                total=len(raw),
            )
            span.set_attribute("recipes.valid", len(filtered.recipes))
            span.set_attribute("recipes.dropped", filtered.dropped)

        logger.info(
            "Recipe generation completed",
            total_recipes=filtered.total,
            valid_recipes=len(filtered.recipes),
            filtered_out=filtered.dropped,
        )
        record_dropped_recipes(filtered.dropped)
        return filtered
