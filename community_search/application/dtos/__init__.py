"""Application DTOs (no ORM dependency)."""

from community_search.application.dtos.analytics import (
    AnalyticsRecord,
    ClientInfo,
    PopularQuery,
    SearchAnalyticsSummary,
    SearchClickEvent,
    SearchEvent,
)
from community_search.application.dtos.search import (
    AuthorRef,
    ContentStats,
    DateRange,
    FacetItem,
    Highlight,
    ModuleSearchPage,
    ModuleSearchParams,
    SearchFacets,
    SearchFilters,
    SearchOutcome,
    SearchQuery,
    SearchResultItem,
)
from community_search.application.dtos.suggestion import SuggestionBundle

__all__ = [
    "AnalyticsRecord",
    "AuthorRef",
    "ClientInfo",
    "ContentStats",
    "DateRange",
    "FacetItem",
    "Highlight",
    "ModuleSearchPage",
    "ModuleSearchParams",
    "PopularQuery",
    "SearchAnalyticsSummary",
    "SearchClickEvent",
    "SearchEvent",
    "SearchFacets",
    "SearchFilters",
    "SearchOutcome",
    "SearchQuery",
    "SearchResultItem",
    "SuggestionBundle",
]
