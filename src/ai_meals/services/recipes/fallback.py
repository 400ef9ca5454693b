"""Detection of the canned fallback response."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ai_meals.services.generation.fallback_recipes import FALLBACK_RECIPE_DESCRIPTION


if TYPE_CHECKING:
    from collections.abc import Sequence


def is_fallback(valid_recipes: Sequence[dict[str, Any]]) -> bool:
    """True if the first recipe carries the fallback description verbatim."""
    if not valid_recipes:
        return False
    return valid_recipes[0].get("description") == FALLBACK_RECIPE_DESCRIPTION
