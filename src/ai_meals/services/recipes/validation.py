"""Ingredient list validation.

Structural gates (type, emptiness, count) short-circuit without touching the
store. Past those, every problem found is collected and reported together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from ai_meals.observability.logging import get_logger
from ai_meals.services.recipes.constants import (
    DUPLICATES_MESSAGE,
    EMPTY_ITEM_TEMPLATE,
    EMPTY_LIST_MESSAGE,
    ERROR_SEPARATOR,
    MAX_INGREDIENT_LENGTH,
    MAX_INGREDIENTS,
    NOT_A_LIST_MESSAGE,
    NOT_A_STRING_TEMPLATE,
    TOO_LONG_TEMPLATE,
    TOO_MANY_TEMPLATE,
    UNKNOWN_TEMPLATE,
)


if TYPE_CHECKING:
    from ai_meals.database.repositories.ingredient import IngredientRecord

logger = get_logger(__name__)


class IngredientLookup(Protocol):
    """The part of the ingredient store the validator needs."""

    async def find_active_by_name(self, name: str) -> IngredientRecord | None: ...


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of validating an ingredient list.

    ``error`` is None exactly when ``is_valid`` is True.
    """

    is_valid: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.is_valid != (self.error is None):
            msg = "is_valid must be True exactly when error is None"
            raise ValueError(msg)

    @classmethod
    def ok(cls) -> ValidationOutcome:
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> ValidationOutcome:
        return cls(is_valid=False, error=error)


def sanitize_ingredient(value: str) -> str:
    """Normalize an ingredient name for lookup and generation."""
    return value.strip().lower()


class IngredientValidator:
    """Validates raw ingredient lists against business rules and the store."""

    def __init__(
        self,
        store: IngredientLookup,
        *,
        max_ingredients: int = MAX_INGREDIENTS,
        max_ingredient_length: int = MAX_INGREDIENT_LENGTH,
    ) -> None:
        self._store = store
        self.max_ingredients = max_ingredients
        self.max_ingredient_length = max_ingredient_length

    async def validate(self, raw_ingredients: Any) -> ValidationOutcome:
        """Validate whatever the caller sent as the ingredient list.

        Args:
            raw_ingredients: Untrusted value from the request body.

        Returns:
            ValidationOutcome with every violation joined by ", ".
        """
        if not isinstance(raw_ingredients, list | tuple):
            return ValidationOutcome.fail(NOT_A_LIST_MESSAGE)
        if len(raw_ingredients) == 0:
            return ValidationOutcome.fail(EMPTY_LIST_MESSAGE)
        if len(raw_ingredients) > self.max_ingredients:
            return ValidationOutcome.fail(
                TOO_MANY_TEMPLATE.format(limit=self.max_ingredients)
            )

        errors: list[str] = []

        if self._has_duplicates(raw_ingredients):
            errors.append(DUPLICATES_MESSAGE)

        for position, item in enumerate(raw_ingredients, start=1):
            error = await self._check_item(position, item)
            if error is not None:
                errors.append(error)

        if errors:
            logger.info(
                "Ingredient validation failed",
                ingredient_count=len(raw_ingredients),
                error_count=len(errors),
            )
            return ValidationOutcome.fail(ERROR_SEPARATOR.join(errors))
        return ValidationOutcome.ok()

    @staticmethod
    def _has_duplicates(items: list[Any] | tuple[Any, ...]) -> bool:
        keys = {
            sanitize_ingredient(item) if isinstance(item, str) else repr(item)
            for item in items
        }
        return len(keys) != len(items)

    async def _check_item(self, position: int, item: Any) -> str | None:
        """Return the first problem with one item, or None.

        At most one store lookup is made per item.
        """
        if not isinstance(item, str):
            return NOT_A_STRING_TEMPLATE.format(position=position)

        trimmed = item.strip()
        if not trimmed:
            return EMPTY_ITEM_TEMPLATE.format(position=position)
        if len(trimmed) > self.max_ingredient_length:
            return TOO_LONG_TEMPLATE.format(position=position)

        record = await self._store.find_active_by_name(trimmed.lower())
        if record is None:
            return UNKNOWN_TEMPLATE.format(name=trimmed)
        return None
