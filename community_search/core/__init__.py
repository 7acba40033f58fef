"""Core: configuration, lifespan, exception handlers, rate limiter."""

from community_search.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
