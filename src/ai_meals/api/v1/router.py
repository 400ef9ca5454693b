"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under the configured ``api.v1_prefix``
(``/api/v1`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from ai_meals.api.v1.endpoints import health, ingredients, recipes, token_usage


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
router.include_router(ingredients.router)
router.include_router(token_usage.router)
