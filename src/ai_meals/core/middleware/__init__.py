"""Custom middleware components."""

from ai_meals.core.middleware.logging import LoggingMiddleware
from ai_meals.core.middleware.request_id import RequestIDMiddleware
from ai_meals.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
