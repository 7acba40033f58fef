"""Application use cases: one entry point per workflow."""

from community_search.application.use_cases.search import SearchService
from community_search.application.use_cases.search_analytics import (
    SearchAnalyticsService,
    resolve_client_ip,
)
from community_search.application.use_cases.suggestions import SuggestionService

__all__ = [
    "SearchAnalyticsService",
    "SearchService",
    "SuggestionService",
    "resolve_client_ip",
]
