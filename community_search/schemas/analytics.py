"""Search analytics API schemas."""

from datetime import datetime
from pydantic import Field

from community_search.application.dtos.analytics import (
    SearchAnalyticsSummary,
    SearchClickEvent,
    SearchEvent,
)
from community_search.schemas.search import CamelModel
from community_search.shared.utils.datetime import ensure_utc


class SearchEventRequest(CamelModel):
    """One search the client ran and displayed."""

    query: str
    result_count: int = Field(..., ge=0)
    clicked_results: list[str] = Field(default_factory=list)
    search_time: float = Field(..., ge=0, description="Milliseconds")
    user_id: str | None = None
    timestamp: datetime
    session_id: str = Field(..., min_length=1)
    filters: dict[str, list[str]] = Field(default_factory=dict)

    def to_dto(self) -> SearchEvent:
        return SearchEvent(
            query=self.query,
            result_count=self.result_count,
            search_time_ms=self.search_time,
            session_id=self.session_id,
            timestamp=ensure_utc(self.timestamp),
            clicked_results=tuple(self.clicked_results),
            user_id=self.user_id,
            filters={key: value for key, value in self.filters.items() if value},
        )


class SearchEventsRequest(CamelModel):
    """Body of POST /search/analytics."""

    events: list[SearchEventRequest]


class SearchEventsStoredResponse(CamelModel):
    stored: int
    message: str = "Analytics events stored successfully"


class SearchClickRequest(CamelModel):
    """Body of PUT /search/analytics."""

    query: str
    result_id: str
    position: int = Field(..., ge=0)
    timestamp: datetime
    session_id: str = Field(..., min_length=1)
    user_id: str | None = None
    result_type: str | None = None
    result_title: str | None = None

    def to_dto(self) -> SearchClickEvent:
        return SearchClickEvent(
            query=self.query,
            result_id=self.result_id,
            position=self.position,
            session_id=self.session_id,
            timestamp=ensure_utc(self.timestamp),
            user_id=self.user_id,
            result_type=self.result_type,
            result_title=self.result_title,
        )


class MessageResponse(CamelModel):
    message: str


class PopularQueryResponse(CamelModel):
    query: str
    count: int


class SearchAnalyticsSummaryResponse(CamelModel):
    """Response of GET /search/analytics."""

    total_searches: int
    total_clicks: int
    click_through_rate: float = Field(..., description="Percent, one decimal")
    unique_queries: int
    popular_queries: list[PopularQueryResponse]
    average_results_count: float

    @classmethod
    def from_dto(cls, summary: SearchAnalyticsSummary) -> "SearchAnalyticsSummaryResponse":
        return cls(
            total_searches=summary.total_searches,
            total_clicks=summary.total_clicks,
            click_through_rate=summary.click_through_rate,
            unique_queries=summary.unique_queries,
            popular_queries=[
                PopularQueryResponse(query=p.query, count=p.count)
                for p in summary.popular_queries
            ],
            average_results_count=summary.average_results_count,
        )

