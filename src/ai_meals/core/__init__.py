"""Core application infrastructure: configuration, events, errors, middleware."""
