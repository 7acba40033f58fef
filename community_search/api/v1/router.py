"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from community_search.api.v1.dependencies.
"""

from fastapi import APIRouter

from community_search.api.v1.endpoints import analytics, health, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    analytics.router, prefix="/search/analytics", tags=["search-analytics"]
)
api_router.include_router(search.router, prefix="/search", tags=["search"])
