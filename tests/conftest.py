"""Pytest configuration and fixtures for community search.

HTTP tests run against community_search.main:app with the content and
analytics repositories replaced by AsyncMock fakes through
app.dependency_overrides, so no database is needed.
"""

import os

# No database in tests: endpoints that are not overridden answer 503.
os.environ["DATABASE_URL"] = ""
os.environ.setdefault("TELEMETRY_ENABLED", "false")

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from community_search.api.v1.dependencies import (
    get_content_repositories,
    get_search_analytics_repo,
)
from community_search.application.dtos.search import ModuleSearchPage
from community_search.core.config import get_settings
from community_search.core.limiter import limiter
from community_search.domain.enums import ContentModule
from community_search.main import app

get_settings.cache_clear()


def _content_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.search_module = AsyncMock(return_value=ModuleSearchPage(items=[], total=0))
    repo.title_completions = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def content_repos() -> dict[ContentModule, AsyncMock]:
    """One fake content repository per module; set search_module.return_value per test."""
    return {module: _content_repo() for module in ContentModule}


@pytest.fixture
def analytics_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.add_search_events = AsyncMock(side_effect=lambda events, client: len(events))
    repo.add_click_event = AsyncMock(return_value=None)
    repo.list_between = AsyncMock(return_value=[])
    return repo


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), without overrides."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def search_client(content_repos, analytics_repo) -> AsyncClient:
    """Async HTTP client with fake content and analytics repositories."""
    app.dependency_overrides[get_content_repositories] = lambda: content_repos
    app.dependency_overrides[get_search_analytics_repo] = lambda: analytics_repo
    limiter.reset()
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        limiter.reset()
