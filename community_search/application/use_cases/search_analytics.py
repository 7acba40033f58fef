"""Search analytics use case: record searches and result clicks, summarize them.

Recording never fails the caller; analytics must not affect search.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import TYPE_CHECKING

from community_search.application.dtos.analytics import (
    ClientInfo,
    PopularQuery,
    SearchAnalyticsSummary,
    SearchClickEvent,
    SearchEvent,
)

if TYPE_CHECKING:
    from community_search.application.interfaces.repositories import (
        ISearchAnalyticsRepository,
    )

logger = logging.getLogger(__name__)

POPULAR_QUERY_LIMIT = 10
SUMMARY_EVENT_LIMIT = 10_000


def resolve_client_ip(forwarded_for: str | None, real_ip: str | None) -> str:
    """First X-Forwarded-For entry, else X-Real-IP, else 'unknown'."""
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return real_ip or "unknown"


class SearchAnalyticsService:
    """Stores search/click events and builds range summaries."""

    def __init__(self, analytics_repo: "ISearchAnalyticsRepository") -> None:
        self.analytics_repo = analytics_repo

    async def record_searches(self, events: list[SearchEvent], client: ClientInfo) -> int:
        """Store events; return how many were submitted (storage errors are logged)."""
        if not events:
            return 0
        try:
            stored = await self.analytics_repo.add_search_events(events, client)
            logger.info("Stored %d search analytics events", stored)
        except Exception as e:
            logger.exception("Failed to store search analytics events: %s", e)
        return len(events)

    async def record_click(self, event: SearchClickEvent, client: ClientInfo) -> None:
        try:
            await self.analytics_repo.add_click_event(event, client)
            logger.debug(
                "Stored search click: query=%r result=%s position=%d",
                event.query,
                event.result_id,
                event.position,
            )
        except Exception as e:
            logger.exception("Failed to store search click event: %s", e)

    async def summarize(self, start: datetime, end: datetime) -> SearchAnalyticsSummary:
        """Summarize events in [start, end]; read errors yield an all-zero summary."""
        try:
            records = await self.analytics_repo.list_between(
                start, end, limit=SUMMARY_EVENT_LIMIT
            )
        except Exception as e:
            logger.exception("Failed to load search analytics: %s", e)
            return SearchAnalyticsSummary()

        searches = [r for r in records if r.event_type == "search"]
        total_clicks = sum(1 for r in records if r.event_type == "search_click")
        total_searches = len(searches)

        query_counts = Counter(r.query for r in searches if r.query)
        popular = tuple(
            PopularQuery(query=query, count=count)
            for query, count in query_counts.most_common(POPULAR_QUERY_LIMIT)
        )
        ctr = (total_clicks / total_searches) * 100 if total_searches else 0.0
        average = (
            sum(r.result_count or 0 for r in searches) / total_searches
            if total_searches
            else 0.0
        )
        return SearchAnalyticsSummary(
            total_searches=total_searches,
            total_clicks=total_clicks,
            click_through_rate=round(ctr, 1),
            unique_queries=len(query_counts),
            popular_queries=popular,
            average_results_count=average,
        )
