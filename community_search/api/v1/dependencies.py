"""FastAPI dependencies (composition root).

Builds repositories and use cases from settings; endpoints never construct
them directly. Tests override these with app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from community_search.application.dtos.analytics import ClientInfo
from community_search.application.interfaces.repositories import (
    IContentSearchRepository,
    ISearchAnalyticsRepository,
)
from community_search.application.use_cases.search import SearchService
from community_search.application.use_cases.search_analytics import (
    SearchAnalyticsService,
    resolve_client_ip,
)
from community_search.application.use_cases.suggestions import SuggestionService
from community_search.core.config import Settings, get_settings
from community_search.domain.enums import ContentModule
from community_search.infrastructure.persistence.database import get_session_factory
from community_search.infrastructure.persistence.repositories import (
    SearchAnalyticsRepository,
    build_content_repositories,
)

ContentRepositories = dict[ContentModule, IContentSearchRepository]


def get_content_repositories() -> ContentRepositories:
    """One content repository per module (raises SqlNotConfiguredException -> 503)."""
    return dict(build_content_repositories(get_session_factory()))


def get_search_service(
    repositories: Annotated[ContentRepositories, Depends(get_content_repositories)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """Cross-module search use case tuned from settings."""
    return SearchService(
        repositories,
        excerpt_length=settings.search_excerpt_length,
        fragment_length=settings.search_fragment_length,
        max_fragments=settings.search_max_fragments,
        author_facet_limit=settings.search_author_facet_limit,
        tag_facet_limit=settings.search_tag_facet_limit,
        overfetch=settings.search_overfetch,
    )


def get_suggestion_service(
    repositories: Annotated[ContentRepositories, Depends(get_content_repositories)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SuggestionService:
    """Suggestion use case (completions, corrections, popular searches)."""
    return SuggestionService(
        repositories,
        title_fetch_limit=settings.suggestion_title_fetch_limit,
        completion_limit=settings.suggestion_completion_limit,
    )


def get_search_analytics_repo() -> ISearchAnalyticsRepository:
    return SearchAnalyticsRepository(get_session_factory())


def get_search_analytics_service(
    analytics_repo: Annotated[ISearchAnalyticsRepository, Depends(get_search_analytics_repo)],
) -> SearchAnalyticsService:
    return SearchAnalyticsService(analytics_repo)


def get_client_info(request: Request) -> ClientInfo:
    """Client metadata stored with analytics events (proxy-aware IP)."""
    headers = request.headers
    return ClientInfo(
        ip=resolve_client_ip(headers.get("x-forwarded-for"), headers.get("x-real-ip")),
        user_agent=headers.get("user-agent"),
        referer=headers.get("referer"),
    )
