"""Token usage reporting endpoints.

Provides:
- GET /token-usage/stats for aggregated usage by period and model
- GET /token-usage/recent for the latest recorded AI calls
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from ai_meals.api.dependencies import get_token_usage_repository
from ai_meals.core.exceptions import AppException
from ai_meals.database.repositories.token_usage import TokenUsageRepository  # noqa: TC001
from ai_meals.observability.logging import get_logger
from ai_meals.schemas.enums import UsagePeriod
from ai_meals.schemas.token_usage import (
    DailyTokenUsageItem,
    ModelTokenUsageItem,
    RecentTokenUsageResponse,
    TokenUsageEntryItem,
    TokenUsageStatsResponse,
    TokenUsageTotalsItem,
)


logger = get_logger(__name__)

router = APIRouter(tags=["Token Usage"])


@router.get(
    "/token-usage/stats",
    response_model=TokenUsageStatsResponse,
    summary="Token usage statistics",
    description=(
        "Request and token totals for a period, optionally for one model, "
        "with a per-model breakdown and a per-day breakdown of the last 30 days."
    ),
)
async def token_usage_stats(
    repository: Annotated[TokenUsageRepository, Depends(get_token_usage_repository)],
    period: Annotated[
        UsagePeriod,
        Query(description="all, today, week or month"),
    ] = UsagePeriod.ALL,
    model: Annotated[
        str | None,
        Query(min_length=1, max_length=100, description="Restrict to this model"),
    ] = None,
) -> TokenUsageStatsResponse:
    """Aggregate recorded AI calls.

    Raises:
        AppException: 500 if the usage store fails.
    """
    try:
        stats = await repository.get_stats(period, model)
    except Exception as e:
        logger.opt(exception=e).error(
            "Error retrieving token usage stats",
            period=period,
            model=model,
        )
        raise AppException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to get token usage statistics",
        ) from e

    logger.info(
        "Token usage stats retrieved",
        period=period,
        model=model,
        total_requests=stats.total.requests,
        total_prompt_tokens=stats.total.prompt_tokens,
        total_completion_tokens=stats.total.completion_tokens,
    )

    return TokenUsageStatsResponse(
        period=period,
        model=model,
        total=TokenUsageTotalsItem(**stats.total.model_dump()),
        daily_breakdown=[
            DailyTokenUsageItem(**day.model_dump()) for day in stats.daily
        ],
        model_breakdown=[
            ModelTokenUsageItem(**item.model_dump()) for item in stats.by_model
        ],
    )


@router.get(
    "/token-usage/recent",
    response_model=RecentTokenUsageResponse,
    summary="Recent token usage",
)
async def recent_token_usage(
    repository: Annotated[TokenUsageRepository, Depends(get_token_usage_repository)],
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Maximum entries"),
    ] = 50,
) -> RecentTokenUsageResponse:
    """Return the most recent AI calls, newest first.

    Raises:
        AppException: 500 if the usage store fails.
    """
    try:
        entries = await repository.get_recent(limit)
    except Exception as e:
        logger.opt(exception=e).error("Error retrieving recent token usage")
        raise AppException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to get recent token usage",
        ) from e

    logger.info("Recent token usage retrieved", limit=limit, count=len(entries))

    return RecentTokenUsageResponse(
        recent_usage=[TokenUsageEntryItem(**entry.model_dump()) for entry in entries],
    )
