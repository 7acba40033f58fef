"""Persistence repositories: SQLAlchemy implementations of the application ports."""

from community_search.infrastructure.persistence.repositories.content_search_repo import (
    ContentSearchRepository,
    build_content_repositories,
)
from community_search.infrastructure.persistence.repositories.search_analytics_repo import (
    SearchAnalyticsRepository,
)

__all__ = [
    "ContentSearchRepository",
    "SearchAnalyticsRepository",
    "build_content_repositories",
]
