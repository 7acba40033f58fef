"""DTOs for search analytics (search events, result clicks, summaries)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal


@dataclass(frozen=True)
class SearchEvent:
    """A search the client performed, reported after results were shown."""

    query: str
    result_count: int
    search_time_ms: float
    session_id: str
    timestamp: datetime
    clicked_results: tuple[str, ...] = ()
    user_id: str | None = None
    filters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchClickEvent:
    """A click on one result of a search."""

    query: str
    result_id: str
    position: int
    session_id: str
    timestamp: datetime
    user_id: str | None = None
    result_type: str | None = None
    result_title: str | None = None


@dataclass(frozen=True)
class ClientInfo:
    """Request metadata stored alongside analytics events."""

    ip: str = "unknown"
    user_agent: str | None = None
    referer: str | None = None


@dataclass(frozen=True)
class AnalyticsRecord:
    """Stored analytics row, as read back for summaries."""

    event_type: Literal["search", "search_click"]
    query: str
    occurred_at: datetime
    result_count: int | None = None


@dataclass(frozen=True)
class PopularQuery:
    query: str
    count: int


@dataclass(frozen=True)
class SearchAnalyticsSummary:
    """Aggregates over search and click events in a time range."""

    total_searches: int = 0
    total_clicks: int = 0
    click_through_rate: float = 0.0
    unique_queries: int = 0
    popular_queries: tuple[PopularQuery, ...] = ()
    average_results_count: float = 0.0
