"""Base class for LLM prompts.

Provides a standardized interface for defining prompts with:
- Typed input variables
- Structured output schemas
- Generation settings
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BasePrompt(ABC, Generic[T]):
    """Base class for all LLM prompts.

    Keeps prompt text, output schema and generation settings together so
    they can be versioned and tested as one unit.

    Example:
        ```python
        class MenuPrompt(BasePrompt[Menu]):
            output_schema = Menu
            system_prompt = "You are a menu planner."

            def format(self, **kwargs: Any) -> str:
                return f"Plan a menu for {kwargs['occasion']}"
        ```
    """

    # Override in subclasses
    output_schema: ClassVar[type[BaseModel]]
    """Pydantic model describing the structured output."""

    system_prompt: ClassVar[str | None] = None
    """Optional system prompt to set context for the LLM."""

    temperature: ClassVar[float] = 0.7
    """Sampling temperature."""

    max_tokens: ClassVar[int | None] = None
    """Maximum tokens to generate (None = model default)."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Format the prompt template with input variables.

        Raises:
            ValueError: If required variables are missing.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__

    def get_options(self) -> dict[str, Any]:
        """Get generation options for this prompt."""
        options: dict[str, Any] = {"temperature": self.temperature}
        if self.max_tokens is not None:
            options["max_tokens"] = self.max_tokens
        return options
