"""AI Meals Service - ingredient-driven AI recipe generation."""
