"""LLM integration module.

Provides the OpenAI chat completions client and prompt definitions used for
recipe generation.
"""

from ai_meals.llm.client.openai import OpenAIClient
from ai_meals.llm.exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMQuotaError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from ai_meals.llm.models import LLMCompletionResult
from ai_meals.llm.prompts.base import BasePrompt


__all__ = [
    "BasePrompt",
    "LLMCompletionResult",
    "LLMConfigurationError",
    "LLMError",
    "LLMQuotaError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
    "OpenAIClient",
]
