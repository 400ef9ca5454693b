"""Token usage ledger for AI generation calls.

One row is written per AI call, successful or not. The read side backs the
token usage reporting endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from ai_meals.database.connection import get_database_pool


if TYPE_CHECKING:
    from asyncpg import Pool, Record

    from ai_meals.schemas.enums import UsagePeriod


# =============================================================================
# Data Transfer Objects
# =============================================================================


class TokenUsageRecord(BaseModel):
    """One AI call, successful or not."""

    method: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    success: bool = True
    error_message: str | None = None


class TokenUsageEntry(BaseModel):
    """A stored usage row."""

    id: int
    method: str
    model: str
    prompt_tokens: int
    completion_tokens: int
    success: bool
    error_message: str | None = None
    created_at: datetime


class TokenUsageTotals(BaseModel):
    """Aggregated request and token counts."""

    requests: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0


class DailyTokenUsage(TokenUsageTotals):
    date: datetime


class ModelTokenUsage(TokenUsageTotals):
    model: str


class TokenUsageStats(BaseModel):
    """Totals for a period, per model, and per day over the last 30 days."""

    total: TokenUsageTotals = Field(default_factory=TokenUsageTotals)
    daily: list[DailyTokenUsage] = Field(default_factory=list)
    by_model: list[ModelTokenUsage] = Field(default_factory=list)


# =============================================================================
# Queries
# =============================================================================

_INSERT = """
    INSERT INTO token_usage (
        method,
        model,
        prompt_tokens,
        completion_tokens,
        total_tokens,
        success,
        error_message
    )
    VALUES ($1, $2, $3, $4, $5, $6, $7)
"""

_SUMS = """
    COUNT(*) AS requests,
    COALESCE(SUM(prompt_tokens), 0) AS prompt_tokens,
    COALESCE(SUM(completion_tokens), 0) AS completion_tokens
"""

# Lower bound on created_at for each reporting period; "all" has none.
PERIOD_STARTS: dict[str, str] = {
    "today": "date_trunc('day', now())",
    "week": "now() - interval '7 days'",
    "month": "now() - interval '1 month'",
}

DAILY_WINDOW_DAYS = 30


class TokenUsageRepository:
    """Reads and writes the ``token_usage`` table."""

    def __init__(self, pool: Pool | None = None) -> None:
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def record(self, usage: TokenUsageRecord) -> None:
        """Insert a usage row."""
        async with self.pool.acquire() as conn:
            await conn.execute(
                _INSERT,
                usage.method,
                usage.model,
                usage.prompt_tokens,
                usage.completion_tokens,
                usage.total_tokens,
                usage.success,
                usage.error_message,
            )

    async def get_stats(
        self,
        period: UsagePeriod | str = "all",
        model: str | None = None,
    ) -> TokenUsageStats:
        """Aggregate usage for a period, optionally for a single model.

        The daily breakdown always covers the last 30 days across all
        models, independent of the filters.

        Raises:
            ValueError: If ``period`` is not all, today, week or month.
        """
        if period != "all" and period not in PERIOD_STARTS:
            msg = f"Unknown usage period: {period}"
            raise ValueError(msg)

        conditions: list[str] = []
        params: list[object] = []
        if period in PERIOD_STARTS:
            conditions.append(f"created_at >= {PERIOD_STARTS[period]}")
        if model:
            params.append(model)
            conditions.append(f"model = ${len(params)}")
        where = f" WHERE {' AND '.join(conditions)}" if conditions else ""

        totals_query = f"SELECT {_SUMS} FROM token_usage{where}"
        by_model_query = (
            f"SELECT model, {_SUMS} FROM token_usage{where} "
            "GROUP BY model ORDER BY model"
        )
        daily_query = (
            f"SELECT date_trunc('day', created_at) AS date, {_SUMS} "
            "FROM token_usage "
            f"WHERE created_at >= now() - interval '{DAILY_WINDOW_DAYS} days' "
            "GROUP BY 1 ORDER BY 1 DESC"
        )

        async with self.pool.acquire() as conn:
            totals = await conn.fetchrow(totals_query, *params)
            by_model = await conn.fetch(by_model_query, *params)
            daily = await conn.fetch(daily_query)

        return TokenUsageStats(
            total=self._row_to_totals(totals) if totals else TokenUsageTotals(),
            daily=[
                DailyTokenUsage(
                    date=row["date"],
                    **self._row_to_totals(row).model_dump(),
                )
                for row in daily
            ],
            by_model=[
                ModelTokenUsage(
                    model=row["model"],
                    **self._row_to_totals(row).model_dump(),
                )
                for row in by_model
            ],
        )

    async def get_recent(self, limit: int = 50) -> list[TokenUsageEntry]:
        """Most recent usage rows, newest first."""
        query = """
            SELECT id, method, model, prompt_tokens, completion_tokens,
                   success, error_message, created_at
            FROM token_usage
            ORDER BY created_at DESC
            LIMIT $1
        """

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, limit)

        return [TokenUsageEntry(**dict(row)) for row in rows]

    @staticmethod
    def _row_to_totals(row: Record) -> TokenUsageTotals:
        return TokenUsageTotals(
            requests=int(row["requests"] or 0),
            prompt_tokens=int(row["prompt_tokens"] or 0),
            completion_tokens=int(row["completion_tokens"] or 0),
        )
