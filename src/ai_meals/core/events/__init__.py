"""Application lifecycle events."""

from ai_meals.core.events.lifespan import lifespan


__all__ = ["lifespan"]
