"""Mapping of request preferences onto the generator's preference shape."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict


if TYPE_CHECKING:
    from ai_meals.schemas.recipe import RecipePreferencesInput


class ServicePreferences(TypedDict, total=False):
    """Preferences as consumed by the recipe generator.

    Keys are only present when the user supplied a value.
    """

    dietary: list[str]
    cuisine: str
    difficulty: str
    max_time: str


def normalize_preferences(
    preferences: RecipePreferencesInput | None,
) -> ServicePreferences:
    """Copy the supplied preference fields, wrapping ``dietary`` in a list."""
    result: ServicePreferences = {}
    if preferences is None:
        return result

    if preferences.dietary is not None:
        result["dietary"] = [preferences.dietary]
    if preferences.cuisine is not None:
        result["cuisine"] = preferences.cuisine
    if preferences.difficulty is not None:
        result["difficulty"] = preferences.difficulty
    if preferences.max_time is not None:
        result["max_time"] = preferences.max_time
    return result
