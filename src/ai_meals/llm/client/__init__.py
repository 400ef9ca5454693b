"""LLM client implementations."""

from ai_meals.llm.client.openai import OpenAIClient
from ai_meals.llm.client.protocol import LLMClientProtocol


__all__ = [
    "LLMClientProtocol",
    "OpenAIClient",
]
