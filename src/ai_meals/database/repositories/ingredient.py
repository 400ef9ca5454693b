"""Ingredient reference data repository.

Ingredient names are stored lower-cased. The table is read-only from the
service's point of view; it is seeded and curated out of band.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from ai_meals.database.connection import get_database_pool


if TYPE_CHECKING:
    from asyncpg import Pool, Record


class IngredientRecord(BaseModel):
    """Data transfer object for one ingredient row."""

    id: int
    name: str
    category: str | None = None


_SELECT = "SELECT id, name, category FROM ingredients"


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class IngredientRepository:
    """Repository for ingredient lookups.

    Uses raw asyncpg queries. A pool may be injected (tests); otherwise the
    application-wide pool is used.
    """

    def __init__(self, pool: Pool | None = None) -> None:
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def find_active_by_name(self, name: str) -> IngredientRecord | None:
        """Look up an active ingredient by its exact (lower-cased) name.

        Returns:
            The matching record, or None if the ingredient is unknown or
            has been deactivated.
        """
        query = f"{_SELECT} WHERE name = $1 AND is_active LIMIT 1"

        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(query, name)

        return self._row_to_record(row) if row is not None else None

    async def search(
        self,
        prefix: str,
        *,
        limit: int = 10,
        category: str | None = None,
    ) -> list[IngredientRecord]:
        """Active ingredients whose name starts with ``prefix``, by name."""
        params: list[object] = [_escape_like(prefix.lower())]
        query = f"{_SELECT} WHERE is_active AND name LIKE $1 || '%'"
        if category:
            params.append(category)
            query += f" AND category = ${len(params)}"
        params.append(limit)
        query += f" ORDER BY name ASC LIMIT ${len(params)}"

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, *params)

        return [self._row_to_record(row) for row in rows]

    async def get_random(self, count: int) -> list[IngredientRecord]:
        """Return ``count`` active ingredients in random order."""
        query = f"{_SELECT} WHERE is_active ORDER BY random() LIMIT $1"

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, count)

        return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row: Record) -> IngredientRecord:
        return IngredientRecord(
            id=row["id"],
            name=row["name"],
            category=row["category"],
        )
