"""AI recipe generation backed by an OpenAI-compatible LLM.

Builds the recipe prompt, requests structured JSON output, records token
usage for every attempt, and substitutes canned recipes when the AI service
fails for reasons the caller cannot act on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ai_meals.database.repositories.token_usage import TokenUsageRecord
from ai_meals.llm.exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMQuotaError,
    LLMRateLimitError,
    LLMValidationError,
)
from ai_meals.llm.prompts.recipe_generation import (
    RecipeGenerationOutput,
    RecipeGenerationPrompt,
)
from ai_meals.observability.logging import get_logger
from ai_meals.services.generation.fallback_recipes import build_fallback_recipes


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ai_meals.database.repositories.token_usage import TokenUsageRepository
    from ai_meals.llm.client.protocol import LLMClientProtocol
    from ai_meals.llm.models import LLMCompletionResult
    from ai_meals.services.generation.models import GenerationResult

logger = get_logger(__name__)

USAGE_METHOD = "generate_recipes"

# Failures the user has to hear about; everything else degrades to fallback.
PROPAGATED_ERRORS = (LLMQuotaError, LLMConfigurationError, LLMRateLimitError)


class RecipeGenerator:
    """Generates recipes for a list of sanitized ingredients."""

    def __init__(
        self,
        llm_client: LLMClientProtocol | None = None,
        usage_repository: TokenUsageRepository | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: LLM client; None means AI generation is disabled and
                every call returns the fallback recipes.
            usage_repository: Optional token usage store.
        """
        self._llm_client = llm_client
        self._usage_repository = usage_repository
        self._prompt = RecipeGenerationPrompt()

    async def generate_recipes(
        self,
        ingredients: Sequence[str],
        preferences: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Generate recipes via the LLM.

        Args:
            ingredients: Sanitized, validated ingredient names.
            preferences: Normalized preferences (dietary, cuisine,
                difficulty, max_time).

        Returns:
            Decoded generation output, or the fallback recipes.

        Raises:
            LLMQuotaError: Account is out of credits.
            LLMConfigurationError: API key missing or rejected.
            LLMRateLimitError: Provider rate limited the request.
        """
        if self._llm_client is None:
            logger.warning("LLM client not available, using fallback recipes")
            return build_fallback_recipes(ingredients)

        prompt = self._prompt.format(
            ingredients=list(ingredients),
            preferences=preferences or {},
        )

        try:
            completion = await self._llm_client.generate(
                prompt,
                system=self._prompt.system_prompt,
                schema=RecipeGenerationOutput,
                options=self._prompt.get_options(),
            )
            result = self._to_generation_result(completion.parsed)
        except PROPAGATED_ERRORS as e:
            await self._record_usage(None, error=e)
            logger.error(
                "AI recipe generation rejected",
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        except LLMError as e:
            await self._record_usage(None, error=e)
            logger.error(
                "AI service error, using fallback recipes",
                error_type=type(e).__name__,
                error=str(e),
            )
            return build_fallback_recipes(ingredients)

        await self._record_usage(completion)
        logger.info(
            "AI recipes generated",
            prompt=self._prompt.name,
            model=completion.model,
            recipe_count=len(result["recipes"]),
            total_tokens=completion.total_tokens,
        )
        return result

    @staticmethod
    def _to_generation_result(parsed: Any) -> GenerationResult:
        """Check the top-level shape of the decoded output.

        Individual recipes are not validated here.
        """
        if not isinstance(parsed, dict) or not isinstance(parsed.get("recipes"), list):
            msg = "AI response has no recipes list"
            raise LLMValidationError(msg)

        suggestions = parsed.get("suggestions")
        return {
            "recipes": parsed["recipes"],
            "suggestions": suggestions if isinstance(suggestions, dict) else {},
        }

    async def _record_usage(
        self,
        completion: LLMCompletionResult | None,
        *,
        error: Exception | None = None,
    ) -> None:
        """Write a token usage row; failures are logged and ignored."""
        if self._usage_repository is None or self._llm_client is None:
            return

        record = TokenUsageRecord(
            method=USAGE_METHOD,
            model=completion.model if completion else self._llm_client.model,
            prompt_tokens=completion.prompt_tokens if completion else 0,
            completion_tokens=completion.completion_tokens if completion else 0,
            total_tokens=completion.total_tokens if completion else 0,
            success=error is None,
            error_message=str(error) if error is not None else None,
        )
        try:
            await self._usage_repository.record(record)
        except Exception as e:
            logger.warning("Failed to record token usage", error=str(e))
        else:
            logger.debug(
                "Token usage recorded",
                model=record.model,
                total_tokens=record.total_tokens,
                success=record.success,
            )
