"""API request/response schemas (pydantic)."""

from community_search.schemas.analytics import (
    MessageResponse,
    SearchAnalyticsSummaryResponse,
    SearchClickRequest,
    SearchEventsRequest,
    SearchEventsStoredResponse,
)
from community_search.schemas.health import HealthResponse, ReadinessErrorResponse
from community_search.schemas.search import (
    SearchRequest,
    SearchResponse,
    SuggestionsResponse,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "ReadinessErrorResponse",
    "SearchAnalyticsSummaryResponse",
    "SearchClickRequest",
    "SearchEventsRequest",
    "SearchEventsStoredResponse",
    "SearchRequest",
    "SearchResponse",
    "SuggestionsResponse",
]
