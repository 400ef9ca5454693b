"""PostgreSQL connection pool management.

The pool is created once in the application lifespan and shared read-mostly
by every request (ingredient lookups, token usage inserts).
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import asyncpg

from ai_meals.core.config import get_settings
from ai_meals.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

logger = get_logger(__name__)

HEALTH_CHECK_TIMEOUT = 2.0  # seconds

_pool: Pool | None = None


async def init_database_pool() -> None:
    """Create the connection pool and verify it with ``SELECT 1``."""
    global _pool  # noqa: PLW0603

    settings = get_settings()
    db = settings.database

    logger.info(
        "Initializing database connection pool",
        dsn=settings.database_url,
    )

    _pool = await asyncpg.create_pool(
        host=db.host,
        port=db.port,
        database=db.name,
        user=db.user,
        password=settings.DATABASE_PASSWORD or None,
        min_size=db.min_pool_size,
        max_size=db.max_pool_size,
        command_timeout=db.command_timeout,
        ssl=True if db.ssl else None,
        server_settings={"search_path": db.db_schema},
    )

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except asyncpg.PostgresError:
        logger.exception("Failed to connect to database")
        raise
    logger.info("Database connection established")


async def close_database_pool() -> None:
    """Close the connection pool if it was created."""
    global _pool  # noqa: PLW0603

    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("Database connection pool closed")


def get_database_pool() -> Pool:
    """Return the shared pool.

    Raises:
        RuntimeError: If the pool has not been initialised.
    """
    if _pool is None:
        msg = "Database pool not initialized. Call init_database_pool() first."
        raise RuntimeError(msg)
    return _pool


async def check_database_health(timeout: float = HEALTH_CHECK_TIMEOUT) -> dict[str, str]:
    """Check the database with a bounded ``SELECT 1``.

    Returns:
        ``{"database": "healthy" | "unhealthy" | "not_initialized"}``
    """
    if _pool is None:
        return {"database": "not_initialized"}

    try:
        async with asyncio.timeout(timeout), _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except (TimeoutError, OSError, asyncpg.PostgresError) as e:
        logger.warning("Database health check failed", error=str(e))
        return {"database": "unhealthy"}
    return {"database": "healthy"}
