"""Unit tests for IngredientValidator.

Tests cover:
- Structural gates that short-circuit without store lookups
- Duplicate detection alongside per-item checks
- Per-item type, emptiness, length and existence checks
- Error aggregation
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ai_meals.services.recipes.validation import (
    IngredientValidator,
    ValidationOutcome,
    sanitize_ingredient,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def validator(ingredient_store: MagicMock) -> IngredientValidator:
    """Validator with default limits over the in-memory store."""
    return IngredientValidator(ingredient_store)


class TestValidationOutcome:
    """Tests for the ValidationOutcome invariant."""

    def test_ok_has_no_error(self) -> None:
        outcome = ValidationOutcome.ok()
        assert outcome.is_valid is True
        assert outcome.error is None

    def test_fail_carries_error(self) -> None:
        outcome = ValidationOutcome.fail("bad")
        assert outcome.is_valid is False
        assert outcome.error == "bad"

    def test_rejects_inconsistent_state(self) -> None:
        with pytest.raises(ValueError, match="is_valid"):
            ValidationOutcome(is_valid=True, error="oops")
        with pytest.raises(ValueError, match="is_valid"):
            ValidationOutcome(is_valid=False, error=None)


class TestStructuralGates:
    """Gates that return immediately without touching the store."""

    @pytest.mark.parametrize(
        "raw",
        [None, "tomato", 42, {"0": "tomato"}],
    )
    async def test_non_sequence_rejected(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
        raw: object,
    ) -> None:
        """Should reject anything that is not a list."""
        outcome = await validator.validate(raw)

        assert outcome == ValidationOutcome.fail("Ingredients must be an array")
        ingredient_store.find_active_by_name.assert_not_awaited()

    async def test_empty_list_rejected(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        outcome = await validator.validate([])

        assert outcome.error == "At least one ingredient is required"
        ingredient_store.find_active_by_name.assert_not_awaited()

    async def test_eleven_items_rejected_without_lookups(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        """Should report only the maximum message, even with bad items."""
        raw = ["tomato", "tomato", 5, "", "x" * 80, *["basil"] * 6]
        assert len(raw) == 11

        outcome = await validator.validate(raw)

        assert outcome.is_valid is False
        assert outcome.error == "Maximum 10 ingredients allowed"
        ingredient_store.find_active_by_name.assert_not_awaited()

    async def test_ten_valid_items_accepted(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        raw = [
            "tomato",
            "basil",
            "garlic",
            "chicken",
            "rice",
            "onion",
            "carrot",
            "potato",
            "egg",
            "cheese",
        ]

        outcome = await validator.validate(raw)

        assert outcome == ValidationOutcome.ok()
        assert ingredient_store.find_active_by_name.await_count == 10

    async def test_tuple_accepted(self, validator: IngredientValidator) -> None:
        outcome = await validator.validate(("tomato", "basil"))

        assert outcome.is_valid is True

    async def test_custom_limit(self, ingredient_store: MagicMock) -> None:
        validator = IngredientValidator(ingredient_store, max_ingredients=2)

        outcome = await validator.validate(["tomato", "basil", "garlic"])

        assert outcome.error == "Maximum 2 ingredients allowed"


class TestDuplicates:
    """Tests for case- and whitespace-insensitive duplicate detection."""

    async def test_duplicate_after_normalization(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        """Should flag duplicates and still check every item."""
        outcome = await validator.validate(["Tomato", " tomato "])

        assert outcome.is_valid is False
        assert outcome.error == "Ingredient list contains duplicates"
        assert ingredient_store.find_active_by_name.await_count == 2

    async def test_duplicates_reported_with_item_errors(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate(["saffron", "SAFFRON", ""])

        assert outcome.error == (
            "Ingredient list contains duplicates, "
            'Ingredient "saffron" is not in our database or is inactive, '
            'Ingredient "SAFFRON" is not in our database or is inactive, '
            "Ingredient at position 3 cannot be empty"
        )

    async def test_non_strings_do_not_break_duplicate_check(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate(["tomato", 1, None])

        assert outcome.error == (
            "Ingredient at position 2 must be a string, "
            "Ingredient at position 3 must be a string"
        )

    async def test_equal_non_strings_are_duplicates(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate([1, 1])

        assert outcome.error is not None
        assert outcome.error.startswith("Ingredient list contains duplicates")


class TestPerItemChecks:
    """Tests for per-item validation."""

    async def test_non_string_item(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        outcome = await validator.validate([{"name": "tomato"}])

        assert outcome.error == "Ingredient at position 1 must be a string"
        ingredient_store.find_active_by_name.assert_not_awaited()

    async def test_whitespace_only_item(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate(["tomato", "   "])

        assert outcome.error == "Ingredient at position 2 cannot be empty"

    async def test_too_long_item(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        outcome = await validator.validate(["a" * 51])

        assert outcome.error == "Ingredient at position 1 is too long"
        ingredient_store.find_active_by_name.assert_not_awaited()

    async def test_length_measured_after_trimming(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        """A 50-character name padded with spaces is not too long."""
        name = "b" * 50

        outcome = await validator.validate([f"  {name}  "])

        assert outcome.error == f'Ingredient "{name}" is not in our database or is inactive'
        ingredient_store.find_active_by_name.assert_awaited_once_with(name)

    async def test_lookup_uses_sanitized_name(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        outcome = await validator.validate(["  Tomato "])

        assert outcome.is_valid is True
        ingredient_store.find_active_by_name.assert_awaited_once_with("tomato")

    async def test_unknown_message_uses_trimmed_original_case(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate([" Dragon Fruit "])

        assert (
            outcome.error
            == 'Ingredient "Dragon Fruit" is not in our database or is inactive'
        )

    async def test_lookups_run_in_order(
        self,
        validator: IngredientValidator,
        ingredient_store: MagicMock,
    ) -> None:
        await validator.validate(["Rice", 7, "Egg", "Basil"])

        looked_up = [c.args[0] for c in ingredient_store.find_active_by_name.await_args_list]
        assert looked_up == ["rice", "egg", "basil"]

    async def test_one_message_per_item(
        self,
        validator: IngredientValidator,
    ) -> None:
        outcome = await validator.validate([3, "", "c" * 60, "unicorn", "tomato"])

        assert outcome.error is not None
        assert outcome.error.split(", ") == [
            "Ingredient at position 1 must be a string",
            "Ingredient at position 2 cannot be empty",
            "Ingredient at position 3 is too long",
            'Ingredient "unicorn" is not in our database or is inactive',
        ]


class TestSanitizeIngredient:
    """Tests for sanitize_ingredient."""

    def test_trims_and_lowercases(self) -> None:
        assert sanitize_ingredient("  Green Onion\t") == "green onion"
