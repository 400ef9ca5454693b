"""HTTP client for the OpenAI chat completions API.

Any OpenAI-compatible endpoint works; the base URL and model come from the
``llm.openai`` settings section. Structured output is requested with a
``json_schema`` response format.
"""

from __future__ import annotations

from typing import Any

import httpx
import orjson
from aiolimiter import AsyncLimiter
from pydantic import BaseModel, ValidationError

from ai_meals.llm.exceptions import (
    LLMConfigurationError,
    LLMQuotaError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from ai_meals.llm.models import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    LLMCompletionResult,
)
from ai_meals.observability.logging import get_logger


logger = get_logger(__name__)

NO_CONTENT_MESSAGE = "No content in AI response"


class OpenAIClient:
    """Async HTTP client for OpenAI chat completions.

    A single request is made per call; failures are mapped to ``LLMError``
    subclasses and never retried here.

    Attributes:
        base_url: API base URL.
        model: Default model (e.g., gpt-4o-mini).
        api_key: API key for bearer authentication.
        timeout: HTTP request timeout in seconds.
    """

    DEFAULT_BASE_URL = "https://api.openai.com/v1"

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        requests_per_minute: float = 60.0,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None
        # Spread requests evenly: 1 request per (60/rpm) seconds
        self._rate_limiter = AsyncLimiter(1, 60.0 / requests_per_minute)

    @property
    def chat_url(self) -> str:
        """Get the chat completions endpoint URL."""
        return f"{self.base_url}/chat/completions"

    async def initialize(self) -> None:
        """Initialize the HTTP client with auth headers."""
        if self._http_client is not None:
            return

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers=headers,
            limits=httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
            ),
        )
        logger.info(
            "OpenAIClient initialized",
            model=self.model,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("OpenAIClient shutdown")

    async def _execute(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Send one chat completion request and map failures."""
        if not self.api_key:
            msg = "invalid_api_key: OPENAI_API_KEY is not configured"
            raise LLMConfigurationError(msg)

        if self._http_client is None:
            await self.initialize()

        assert self._http_client is not None

        await self._rate_limiter.acquire()

        try:
            response = await self._http_client.post(
                self.chat_url,
                json=request.model_dump(exclude_none=True),
            )
        except httpx.TimeoutException as e:
            logger.warning("OpenAI request timeout", timeout=self.timeout)
            msg = f"OpenAI timeout after {self.timeout}s"
            raise LLMTimeoutError(msg) from e
        except httpx.RequestError as e:
            logger.warning("OpenAI connection error", error=str(e))
            msg = f"Cannot connect to OpenAI: {e}"
            raise LLMUnavailableError(msg) from e

        if response.is_error:
            raise self._map_error_response(response)

        try:
            return ChatCompletionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(
                "Malformed OpenAI response",
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
                body=response.text[:500],
            )
            msg = f"OpenAI returned a malformed response: {e}"
            raise LLMResponseError(msg) from e

    @staticmethod
    def _map_error_response(response: httpx.Response) -> Exception:
        """Translate an error response into an LLM exception.

        The provider's error code is kept at the start of the message.
        """
        status_code = response.status_code
        code = ""
        error_type = ""
        message = response.reason_phrase or f"HTTP {status_code}"
        try:
            error = response.json().get("error") or {}
        except (ValueError, AttributeError):
            error = {}
        if isinstance(error, dict):
            code = str(error.get("code") or "")
            error_type = str(error.get("type") or "")
            message = str(error.get("message") or message)

        logger.warning(
            "OpenAI request failed",
            status_code=status_code,
            code=code or None,
            error_type=error_type or None,
        )

        if status_code == 402 or "insufficient_quota" in (code, error_type):
            return LLMQuotaError(f"insufficient_quota: {message}")
        if code == "invalid_api_key":
            return LLMConfigurationError(f"invalid_api_key: {message}")
        if status_code == 401:
            return LLMConfigurationError(f"authentication failed: {message}")
        if status_code == 429:
            return LLMRateLimitError(f"rate_limit_exceeded: {message}")
        return LLMResponseError(f"OpenAI returned {status_code}: {message}")

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: type[BaseModel] | None = None,
        options: dict[str, Any] | None = None,
    ) -> LLMCompletionResult:
        """Generate a completion from OpenAI.

        Args:
            prompt: Input prompt text.
            system: Optional system prompt for context.
            schema: Optional Pydantic model describing the JSON output.
            options: Generation options (temperature, max_tokens).

        Returns:
            LLMCompletionResult with raw response and, when a schema was
            given, the decoded JSON object.

        Raises:
            LLMQuotaError: If the account is out of credits.
            LLMConfigurationError: If the API key is missing or rejected.
            LLMRateLimitError: If OpenAI rate limits the request.
            LLMUnavailableError: If OpenAI cannot be reached.
            LLMTimeoutError: If the request times out.
            LLMResponseError: If OpenAI returns an error, a malformed body or no
                content.
            LLMValidationError: If the content is not a JSON object.
        """
        messages: list[ChatMessage] = []
        if system:
            messages.append(ChatMessage(role="system", content=system))
        messages.append(ChatMessage(role="user", content=prompt))

        response_format: dict[str, Any] | None = None
        if schema is not None:
            response_format = {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__,
                    "schema": schema.model_json_schema(by_alias=True),
                },
            }

        options = options or {}
        request = ChatCompletionRequest(
            model=self.model,
            messages=messages,
            response_format=response_format,
            temperature=options.get("temperature", 0.7),
            max_tokens=options.get("max_tokens"),
        )

        response = await self._execute(request)

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMResponseError(NO_CONTENT_MESSAGE)

        parsed: Any = None
        if schema is not None:
            try:
                parsed = orjson.loads(content)
            except orjson.JSONDecodeError as e:
                logger.warning(
                    "Failed to decode structured OpenAI output",
                    schema=schema.__name__,
                    raw_response=content[:500],
                )
                msg = f"Response is not valid JSON for {schema.__name__}: {e}"
                raise LLMValidationError(msg) from e
            if not isinstance(parsed, dict):
                msg = f"Response for {schema.__name__} is not a JSON object"
                raise LLMValidationError(msg)

        usage = response.usage
        return LLMCompletionResult(
            raw_response=content,
            parsed=parsed,
            model=response.model,
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
        )
