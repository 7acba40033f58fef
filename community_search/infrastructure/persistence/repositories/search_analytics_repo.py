"""Search analytics repository. Append-only; implements ISearchAnalyticsRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from community_search.application.dtos.analytics import (
    AnalyticsRecord,
    ClientInfo,
    SearchClickEvent,
    SearchEvent,
)
from community_search.infrastructure.persistence.models.search_analytics import (
    SearchAnalyticsEvent,
)
from community_search.shared.utils.datetime import ensure_utc
from community_search.shared.utils.generators import generate_cuid


def _orm_to_record(row: SearchAnalyticsEvent) -> AnalyticsRecord:
    """Map ORM to application DTO."""
    return AnalyticsRecord(
        event_type=row.event_type,  # type: ignore[arg-type]
        query=row.query,
        occurred_at=row.occurred_at,
        result_count=row.result_count,
    )


class SearchAnalyticsRepository:
    """Stores search/click events; reads them back by time range.

    Each write runs in its own committed transaction so a failed analytics
    write never shares state with the request that reported it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def add_search_events(
        self, events: list[SearchEvent], client: ClientInfo
    ) -> int:
        """Append one row per search event; return number stored."""
        rows = [
            SearchAnalyticsEvent(
                id=generate_cuid(),
                event_type="search",
                query=event.query,
                session_id=event.session_id,
                user_id=event.user_id,
                result_count=event.result_count,
                search_time_ms=round(event.search_time_ms),
                filters=dict(event.filters),
                ip_address=client.ip,
                user_agent=client.user_agent,
                referer=client.referer,
                occurred_at=ensure_utc(event.timestamp),
            )
            for event in events
        ]
        async with self.session_factory() as session, session.begin():
            session.add_all(rows)
        return len(rows)

    async def add_click_event(self, event: SearchClickEvent, client: ClientInfo) -> None:
        """Append one result-click row."""
        row = SearchAnalyticsEvent(
            id=generate_cuid(),
            event_type="search_click",
            query=event.query,
            session_id=event.session_id,
            user_id=event.user_id,
            result_id=event.result_id,
            position=event.position,
            result_type=event.result_type,
            result_title=event.result_title,
            ip_address=client.ip,
            user_agent=client.user_agent,
            referer=client.referer,
            occurred_at=ensure_utc(event.timestamp),
        )
        async with self.session_factory() as session, session.begin():
            session.add(row)

    async def list_between(
        self, start: datetime, end: datetime, limit: int = 10_000
    ) -> list[AnalyticsRecord]:
        """Events with occurred_at in [start, end], oldest first."""
        stmt = (
            select(SearchAnalyticsEvent)
            .where(
                and_(
                    SearchAnalyticsEvent.occurred_at >= ensure_utc(start),
                    SearchAnalyticsEvent.occurred_at <= ensure_utc(end),
                )
            )
            .order_by(SearchAnalyticsEvent.occurred_at)
            .limit(limit)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [_orm_to_record(row) for row in result.scalars().all()]
