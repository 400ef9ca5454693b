"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn ai_meals.main:app --reload

    # Production
    uvicorn ai_meals.main:app --host 0.0.0.0 --workers 4
"""

from ai_meals.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from ai_meals.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "ai_meals.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
