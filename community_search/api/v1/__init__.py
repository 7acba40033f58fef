"""API version 1."""

from community_search.api.v1.router import api_router

__all__ = ["api_router"]
