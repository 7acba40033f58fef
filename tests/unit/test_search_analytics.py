"""SearchAnalyticsService unit tests with a mocked analytics repository."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from community_search.application.dtos.analytics import (
    AnalyticsRecord,
    ClientInfo,
    PopularQuery,
    SearchAnalyticsSummary,
    SearchClickEvent,
    SearchEvent,
)
from community_search.application.use_cases.search_analytics import (
    SearchAnalyticsService,
    resolve_client_ip,
)
from tests.factories import NOW


def _search(query: str, result_count: int | None) -> AnalyticsRecord:
    return AnalyticsRecord(event_type="search", query=query, occurred_at=NOW, result_count=result_count)


def _click(query: str) -> AnalyticsRecord:
    return AnalyticsRecord(event_type="search_click", query=query, occurred_at=NOW)


def _event(query: str = "redstone") -> SearchEvent:
    return SearchEvent(
        query=query,
        result_count=3,
        search_time_ms=12.5,
        session_id="sess-1",
        timestamp=NOW,
    )


@pytest.mark.parametrize(
    ("forwarded_for", "real_ip", "expected"),
    [
        ("203.0.113.7, 10.0.0.1", "10.0.0.2", "203.0.113.7"),
        (" 198.51.100.4 ", None, "198.51.100.4"),
        (None, "10.0.0.2", "10.0.0.2"),
        ("", None, "unknown"),
        (None, None, "unknown"),
    ],
)
def test_resolve_client_ip(forwarded_for, real_ip, expected: str) -> None:
    assert resolve_client_ip(forwarded_for, real_ip) == expected


async def test_record_searches_returns_count() -> None:
    repo = AsyncMock()
    repo.add_search_events = AsyncMock(return_value=2)
    service = SearchAnalyticsService(repo)
    client = ClientInfo(ip="203.0.113.7", user_agent="pytest")

    stored = await service.record_searches([_event(), _event("farm")], client)

    assert stored == 2
    repo.add_search_events.assert_awaited_once()
    assert repo.add_search_events.await_args.args[1] == client


async def test_record_searches_swallows_storage_errors() -> None:
    repo = AsyncMock()
    repo.add_search_events = AsyncMock(side_effect=RuntimeError("db down"))
    stored = await SearchAnalyticsService(repo).record_searches([_event()], ClientInfo())
    assert stored == 1


async def test_record_searches_empty_batch() -> None:
    repo = AsyncMock()
    assert await SearchAnalyticsService(repo).record_searches([], ClientInfo()) == 0
    repo.add_search_events.assert_not_awaited()


async def test_record_click_swallows_storage_errors() -> None:
    repo = AsyncMock()
    repo.add_click_event = AsyncMock(side_effect=RuntimeError("db down"))
    click = SearchClickEvent(
        query="redstone", result_id="f1", position=0, session_id="sess-1", timestamp=NOW
    )
    await SearchAnalyticsService(repo).record_click(click, ClientInfo())
    repo.add_click_event.assert_awaited_once()


async def test_summarize_counts_and_rates() -> None:
    repo = AsyncMock()
    repo.list_between = AsyncMock(
        return_value=[
            _search("redstone", 10),
            _search("farm", 0),
            _search("redstone", 20),
            _click("redstone"),
        ]
    )
    start, end = NOW - timedelta(days=7), NOW

    summary = await SearchAnalyticsService(repo).summarize(start, end)

    assert summary.total_searches == 3
    assert summary.total_clicks == 1
    assert summary.click_through_rate == 33.3
    assert summary.unique_queries == 2
    assert summary.popular_queries == (
        PopularQuery(query="redstone", count=2),
        PopularQuery(query="farm", count=1),
    )
    assert summary.average_results_count == 10.0
    repo.list_between.assert_awaited_once_with(start, end, limit=10_000)


async def test_summarize_without_searches() -> None:
    repo = AsyncMock()
    repo.list_between = AsyncMock(return_value=[_click("redstone")])
    summary = await SearchAnalyticsService(repo).summarize(NOW - timedelta(days=1), NOW)
    assert summary.total_searches == 0
    assert summary.total_clicks == 1
    assert summary.click_through_rate == 0.0
    assert summary.average_results_count == 0.0


async def test_summarize_read_error_gives_zero_summary() -> None:
    repo = AsyncMock()
    repo.list_between = AsyncMock(side_effect=RuntimeError("db down"))
    summary = await SearchAnalyticsService(repo).summarize(NOW - timedelta(days=1), NOW)
    assert summary == SearchAnalyticsSummary()
