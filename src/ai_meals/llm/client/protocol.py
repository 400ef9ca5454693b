"""LLM Client Protocol definition.

Defines the interface the generation service depends on, so tests and
alternative providers can stand in for the OpenAI client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel


if TYPE_CHECKING:
    from ai_meals.llm.models import LLMCompletionResult


@runtime_checkable
class LLMClientProtocol(Protocol):
    """Protocol for LLM client implementations."""

    model: str

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: type[BaseModel] | None = None,
        options: dict[str, Any] | None = None,
    ) -> LLMCompletionResult:
        """Generate a completion from the LLM.

        Args:
            prompt: Input prompt text.
            system: Optional system prompt.
            schema: Optional Pydantic model describing the JSON output.
            options: Generation options (temperature, max_tokens).

        Returns:
            LLMCompletionResult with raw_response and, when a schema was
            given, the decoded JSON object in ``parsed``.

        Raises:
            LLMQuotaError: Account is out of credits.
            LLMConfigurationError: Credentials rejected or missing.
            LLMRateLimitError: Provider rate limited the request.
            LLMUnavailableError: Service unreachable.
            LLMTimeoutError: Request timed out.
            LLMResponseError: HTTP error or empty completion.
            LLMValidationError: Completion is not a JSON object.
        """
        ...
