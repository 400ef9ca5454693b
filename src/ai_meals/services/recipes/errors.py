"""Classification of generation failures into user-facing errors.

Classification looks only at the lower-cased exception message. The LLM
client keeps provider error codes in its messages, so codes such as
``insufficient_quota`` survive to this point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from fastapi import status


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    """HTTP status and message to report for a failure."""

    http_status: int
    user_message: str


CREDIT_LIMIT = ErrorClassification(
    status.HTTP_503_SERVICE_UNAVAILABLE,
    "AI service is temporarily unavailable due to credit limits. "
    "Please try again later.",
)
RATE_LIMITED = ErrorClassification(
    status.HTTP_429_TOO_MANY_REQUESTS,
    "Too many requests. Please wait a moment and try again.",
)
CONFIGURATION = ErrorClassification(
    status.HTTP_500_INTERNAL_SERVER_ERROR,
    "AI service configuration error. Please contact support.",
)
GENERIC = ErrorClassification(
    status.HTTP_500_INTERNAL_SERVER_ERROR,
    "Failed to generate recipes",
)

# First match wins.
CLASSIFICATION_RULES: Final[tuple[tuple[tuple[str, ...], ErrorClassification], ...]] = (
    (("insufficient_quota", "billing", "credit"), CREDIT_LIMIT),
    (("rate_limit", "too many requests"), RATE_LIMITED),
    (("invalid_api_key", "authentication"), CONFIGURATION),
)


def classify_error(error: BaseException | str) -> ErrorClassification:
    """Map a failure to its HTTP status and user message."""
    message = str(error).lower()
    for needles, classification in CLASSIFICATION_RULES:
        if any(needle in message for needle in needles):
            return classification
    return GENERIC
