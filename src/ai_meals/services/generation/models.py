"""Shapes exchanged between the generator and its callers."""

from __future__ import annotations

from typing import Any, TypedDict


class GenerationResult(TypedDict):
    """Decoded generation output.

    ``recipes`` is untrusted data straight from the model (or the canned
    fallback); callers filter it before use.
    """

    recipes: list[Any]
    suggestions: dict[str, Any]
