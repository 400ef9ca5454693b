"""Token usage reporting schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ai_meals.schemas.base import APIResponse
from ai_meals.schemas.enums import UsagePeriod


class TokenUsageTotalsItem(APIResponse):
    """Request and token counts."""

    requests: int = Field(default=0, description="Number of AI calls")
    prompt_tokens: int = Field(default=0, description="Prompt tokens used")
    completion_tokens: int = Field(default=0, description="Completion tokens used")


class DailyTokenUsageItem(TokenUsageTotalsItem):
    """Counts for one calendar day."""

    date: datetime = Field(..., description="Start of the day")


class ModelTokenUsageItem(TokenUsageTotalsItem):
    """Counts for one model."""

    model: str = Field(..., description="Model name")


class TokenUsageStatsResponse(APIResponse):
    """Aggregated token usage."""

    success: bool = Field(default=True)
    period: UsagePeriod = Field(..., description="Reporting window")
    model: str | None = Field(default=None, description="Model filter, if any")
    total: TokenUsageTotalsItem
    daily_breakdown: list[DailyTokenUsageItem] = Field(
        default_factory=list,
        description="Per-day counts for the last 30 days, newest first",
    )
    model_breakdown: list[ModelTokenUsageItem] = Field(default_factory=list)


class TokenUsageEntryItem(APIResponse):
    """A single recorded AI call."""

    id: int
    method: str
    model: str
    prompt_tokens: int
    completion_tokens: int
    success: bool
    error_message: str | None = None
    created_at: datetime


class RecentTokenUsageResponse(APIResponse):
    """Most recent AI calls."""

    success: bool = Field(default=True)
    recent_usage: list[TokenUsageEntryItem] = Field(default_factory=list)
