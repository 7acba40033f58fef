"""Search analytics API: report searches and result clicks, read range summaries."""

from datetime import datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from community_search.api.v1.dependencies import get_client_info, get_search_analytics_service
from community_search.application.dtos.analytics import ClientInfo
from community_search.application.use_cases.search_analytics import SearchAnalyticsService
from community_search.core.limiter import limit_analytics
from community_search.domain.exceptions import ValidationException
from community_search.schemas.analytics import (
    MessageResponse,
    SearchAnalyticsSummaryResponse,
    SearchClickRequest,
    SearchEventsRequest,
    SearchEventsStoredResponse,
)
from community_search.shared.utils.datetime import ensure_utc, utc_now

DEFAULT_SUMMARY_WINDOW = timedelta(days=7)

router = APIRouter()


@router.post("", response_model=SearchEventsStoredResponse)
@limit_analytics
async def record_searches(
    request: Request,
    body: SearchEventsRequest,
    analytics_svc: Annotated[SearchAnalyticsService, Depends(get_search_analytics_service)],
    client: Annotated[ClientInfo, Depends(get_client_info)],
) -> SearchEventsStoredResponse:
    """Store a batch of search events."""
    stored = await analytics_svc.record_searches([e.to_dto() for e in body.events], client)
    return SearchEventsStoredResponse(stored=stored)


@router.put("", response_model=MessageResponse)
@limit_analytics
async def record_click(
    request: Request,
    body: SearchClickRequest,
    analytics_svc: Annotated[SearchAnalyticsService, Depends(get_search_analytics_service)],
    client: Annotated[ClientInfo, Depends(get_client_info)],
) -> MessageResponse:
    """Store one result click."""
    await analytics_svc.record_click(body.to_dto(), client)
    return MessageResponse(message="Click event tracked successfully")


@router.get("", response_model=SearchAnalyticsSummaryResponse)
async def get_summary(
    analytics_svc: Annotated[SearchAnalyticsService, Depends(get_search_analytics_service)],
    from_: datetime | None = Query(None, alias="from"),
    to: datetime | None = Query(None),
) -> SearchAnalyticsSummaryResponse:
    """Summary of searches and clicks in [from, to] (default: the last 7 days)."""
    end = ensure_utc(to) if to is not None else utc_now()
    start = ensure_utc(from_) if from_ is not None else end - DEFAULT_SUMMARY_WINDOW
    if start > end:
        raise ValidationException("'from' must not be after 'to'", field="from")
    summary = await analytics_svc.summarize(start, end)
    return SearchAnalyticsSummaryResponse.from_dto(summary)
