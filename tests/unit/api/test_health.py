"""Unit tests for health and readiness endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


if TYPE_CHECKING:
    import httpx
    from fastapi import FastAPI

    from ai_meals.core.config import Settings

pytestmark = pytest.mark.unit


class TestHealthCheck:
    """Tests for GET /health."""

    async def test_reports_healthy(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
    ) -> None:
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == settings.app.version
        assert body["environment"] == "test"
        assert body["uptime_seconds"] >= 0
        assert "timestamp" in body


class TestReadinessCheck:
    """Tests for GET /ready."""

    async def test_ready_when_database_healthy(
        self,
        app: FastAPI,
        client: httpx.AsyncClient,
    ) -> None:
        app.state.llm_client = MagicMock()
        with patch(
            "ai_meals.api.v1.endpoints.health.check_database_health",
            new=AsyncMock(return_value={"database": "healthy"}),
        ):
            response = await client.get("/api/v1/ready")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "ready"
        assert body["dependencies"] == {"database": "healthy", "llm": "configured"}

    @pytest.mark.parametrize("database", ["unhealthy", "not_initialized"])
    async def test_degraded_without_database(
        self,
        client: httpx.AsyncClient,
        database: str,
    ) -> None:
        with patch(
            "ai_meals.api.v1.endpoints.health.check_database_health",
            new=AsyncMock(return_value={"database": database}),
        ):
            response = await client.get("/api/v1/ready")

        body = response.json()
        assert body["status"] == "degraded"
        assert body["dependencies"]["database"] == database

    async def test_missing_llm_client_does_not_degrade(
        self,
        client: httpx.AsyncClient,
    ) -> None:
        with patch(
            "ai_meals.api.v1.endpoints.health.check_database_health",
            new=AsyncMock(return_value={"database": "healthy"}),
        ):
            response = await client.get("/api/v1/ready")

        body = response.json()
        assert body["status"] == "ready"
        assert body["dependencies"]["llm"] == "not_configured"
