"""Unit tests for token usage endpoints.

Tests cover:
- Stats totals with per-model and per-day breakdowns
- Period and model filters
- Recent usage with limit
- Query parameter validation
- Store failures
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from ai_meals.database.repositories.token_usage import (
    DailyTokenUsage,
    ModelTokenUsage,
    TokenUsageEntry,
    TokenUsageStats,
    TokenUsageTotals,
)
from ai_meals.schemas.enums import UsagePeriod


if TYPE_CHECKING:
    import httpx

pytestmark = pytest.mark.unit

STATS_URL = "/api/v1/token-usage/stats"
RECENT_URL = "/api/v1/token-usage/recent"

DAY = datetime(2026, 10, 18, tzinfo=UTC)


class TestTokenUsageStats:
    """Tests for GET /token-usage/stats."""

    async def test_returns_totals_and_breakdowns(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        usage_store.get_stats.return_value = TokenUsageStats(
            total=TokenUsageTotals(requests=3, prompt_tokens=300, completion_tokens=600),
            daily=[
                DailyTokenUsage(
                    date=DAY,
                    requests=3,
                    prompt_tokens=300,
                    completion_tokens=600,
                ),
            ],
            by_model=[
                ModelTokenUsage(
                    model="gpt-4o-mini",
                    requests=3,
                    prompt_tokens=300,
                    completion_tokens=600,
                ),
            ],
        )

        response = await client.get(STATS_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["period"] == "all"
        assert data["model"] is None
        assert data["total"] == {
            "requests": 3,
            "promptTokens": 300,
            "completionTokens": 600,
        }
        assert data["dailyBreakdown"][0]["requests"] == 3
        assert data["dailyBreakdown"][0]["date"].startswith("2026-10-18")
        assert data["modelBreakdown"] == [
            {
                "model": "gpt-4o-mini",
                "requests": 3,
                "promptTokens": 300,
                "completionTokens": 600,
            },
        ]
        usage_store.get_stats.assert_awaited_once_with(UsagePeriod.ALL, None)

    async def test_empty_ledger(
        self,
        client: httpx.AsyncClient,
    ) -> None:
        response = await client.get(STATS_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == {"requests": 0, "promptTokens": 0, "completionTokens": 0}
        assert data["dailyBreakdown"] == []
        assert data["modelBreakdown"] == []

    async def test_passes_period_and_model(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        response = await client.get(
            STATS_URL,
            params={"period": "week", "model": "gpt-4o"},
        )

        assert response.status_code == 200
        assert response.json()["period"] == "week"
        assert response.json()["model"] == "gpt-4o"
        usage_store.get_stats.assert_awaited_once_with(UsagePeriod.WEEK, "gpt-4o")

    @pytest.mark.parametrize(
        "params",
        [
            {"period": "year"},
            {"model": ""},
            {"model": "m" * 101},
        ],
    )
    async def test_invalid_query(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
        params: dict[str, object],
    ) -> None:
        response = await client.get(STATS_URL, params=params)

        assert response.status_code == 400
        assert response.json()["success"] is False
        usage_store.get_stats.assert_not_awaited()

    async def test_store_failure(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        usage_store.get_stats.side_effect = RuntimeError("relation does not exist")

        response = await client.get(STATS_URL)

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to get token usage statistics"


class TestRecentTokenUsage:
    """Tests for GET /token-usage/recent."""

    async def test_returns_entries(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        usage_store.get_recent.return_value = [
            TokenUsageEntry(
                id=7,
                method="generate_recipes",
                model="gpt-4o-mini",
                prompt_tokens=0,
                completion_tokens=0,
                success=False,
                error_message="rate_limit_exceeded: slow down",
                created_at=DAY,
            ),
        ]

        response = await client.get(RECENT_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        entry = data["recentUsage"][0]
        assert entry["id"] == 7
        assert entry["method"] == "generate_recipes"
        assert entry["success"] is False
        assert entry["errorMessage"] == "rate_limit_exceeded: slow down"
        assert entry["createdAt"].startswith("2026-10-18")
        usage_store.get_recent.assert_awaited_once_with(50)

    async def test_passes_limit(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        await client.get(RECENT_URL, params={"limit": 5})

        usage_store.get_recent.assert_awaited_once_with(5)

    @pytest.mark.parametrize("limit", [0, 101, "many"])
    async def test_invalid_limit(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
        limit: object,
    ) -> None:
        response = await client.get(RECENT_URL, params={"limit": limit})

        assert response.status_code == 400
        usage_store.get_recent.assert_not_awaited()

    async def test_store_failure(
        self,
        client: httpx.AsyncClient,
        usage_store: MagicMock,
    ) -> None:
        usage_store.get_recent.side_effect = RuntimeError("down")

        response = await client.get(RECENT_URL)

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to get recent token usage"
