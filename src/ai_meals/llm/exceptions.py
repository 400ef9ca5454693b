"""LLM client exceptions.

These exceptions are raised by the LLM client and handled by the generation
service, which either re-raises them for the request handler to classify or
substitutes canned fallback recipes.

Provider error codes (``insufficient_quota``, ``invalid_api_key``,
``rate_limit_exceeded``) are kept in the exception message so downstream
classification can work on the message alone.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM client errors."""


class LLMUnavailableError(LLMError):
    """Raised when the LLM service cannot be reached.

    This includes connection errors, timeouts, and service unavailability.
    """


class LLMTimeoutError(LLMUnavailableError):
    """Raised when an LLM request times out."""


class LLMResponseError(LLMError):
    """Raised when the LLM returns an error response or an empty completion."""


class LLMValidationError(LLMError):
    """Raised when the LLM response is not the JSON object we asked for."""


class LLMRateLimitError(LLMError):
    """Raised when the LLM service rate limits the request."""


class LLMQuotaError(LLMError):
    """Raised when the account has run out of credits or quota."""


class LLMConfigurationError(LLMError):
    """Raised when the LLM client is misconfigured or rejected our credentials."""
