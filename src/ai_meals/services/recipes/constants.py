"""Constants for recipe generation requests."""

from __future__ import annotations

from typing import Final


# =============================================================================
# Ingredient Limits
# =============================================================================

MAX_INGREDIENTS: Final[int] = 10
MAX_INGREDIENT_LENGTH: Final[int] = 50


# =============================================================================
# Validation Messages
# =============================================================================

NOT_A_LIST_MESSAGE: Final[str] = "Ingredients must be an array"
EMPTY_LIST_MESSAGE: Final[str] = "At least one ingredient is required"
TOO_MANY_TEMPLATE: Final[str] = "Maximum {limit} ingredients allowed"
DUPLICATES_MESSAGE: Final[str] = "Ingredient list contains duplicates"
NOT_A_STRING_TEMPLATE: Final[str] = "Ingredient at position {position} must be a string"
EMPTY_ITEM_TEMPLATE: Final[str] = "Ingredient at position {position} cannot be empty"
TOO_LONG_TEMPLATE: Final[str] = "Ingredient at position {position} is too long"
UNKNOWN_TEMPLATE: Final[str] = 'Ingredient "{name}" is not in our database or is inactive'
ERROR_SEPARATOR: Final[str] = ", "


# =============================================================================
# Fallback Signalling
# =============================================================================

FALLBACK_MESSAGE: Final[str] = (
    "AI service is temporarily unavailable. Recipes shown will not make sense "
    "but will show a result example."
)
