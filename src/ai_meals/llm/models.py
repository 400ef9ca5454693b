"""LLM client data models.

Request/response models for the OpenAI-compatible chat completions API and
the internal completion result handed to services.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class LLMCompletionResult(BaseModel):
    """Internal result from an LLM completion.

    Wraps the raw response with the parsed structured output.
    """

    raw_response: str = Field(..., description="Raw text response from LLM")
    parsed: Any | None = Field(
        default=None,
        description="Parsed JSON output if a schema was requested",
    )
    model: str = Field(..., description="Model that generated response")
    prompt_tokens: int = Field(default=0, description="Input token count")
    completion_tokens: int = Field(default=0, description="Output token count")
    total_tokens: int = Field(default=0, description="Total token count")

    model_config = {"frozen": True}


# =============================================================================
# OpenAI chat completions API models
# =============================================================================


class ChatMessage(BaseModel):
    """Single message in chat format."""

    role: str = Field(..., description="Message role: system, user, or assistant")
    content: str | None = Field(default=None, description="Message content")


class ChatCompletionRequest(BaseModel):
    """Request body for the /chat/completions endpoint."""

    model: str = Field(..., description="Model name (e.g., 'gpt-4o-mini')")
    messages: list[ChatMessage] = Field(..., description="Chat messages")
    response_format: dict[str, Any] | None = Field(
        default=None,
        description="Structured output format, e.g. a json_schema definition",
    )
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int | None = Field(
        default=None,
        description="Maximum tokens to generate",
    )


class ChatUsage(BaseModel):
    """Token usage from a chat completion."""

    prompt_tokens: int = Field(default=0, description="Input token count")
    completion_tokens: int = Field(default=0, description="Output token count")
    total_tokens: int = Field(default=0, description="Total token count")


class ChatChoice(BaseModel):
    """Single choice in a chat completion."""

    index: int = Field(default=0, description="Choice index")
    message: ChatMessage = Field(..., description="Generated message")
    finish_reason: str | None = Field(default=None, description="Stop reason")


class ChatCompletionResponse(BaseModel):
    """Response from the /chat/completions endpoint."""

    id: str | None = Field(default=None, description="Unique response ID")
    model: str = Field(..., description="Model that generated response")
    choices: list[ChatChoice] = Field(
        default_factory=list, description="Generated completions"
    )
    usage: ChatUsage | None = Field(default=None, description="Token usage")
    created: int | None = Field(default=None, description="Unix timestamp")
