"""Application layer: DTOs, interfaces, pure services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the repository interfaces.
"""

from community_search.application.interfaces import (
    IContentSearchRepository,
    ISearchAnalyticsRepository,
)
from community_search.application.use_cases import (
    SearchAnalyticsService,
    SearchService,
    SuggestionService,
)

__all__ = [
    "IContentSearchRepository",
    "ISearchAnalyticsRepository",
    "SearchAnalyticsService",
    "SearchService",
    "SuggestionService",
]
