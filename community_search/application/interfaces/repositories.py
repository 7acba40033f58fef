"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from community_search.application.dtos.analytics import (
        AnalyticsRecord,
        ClientInfo,
        SearchClickEvent,
        SearchEvent,
    )
    from community_search.application.dtos.search import (
        ModuleSearchPage,
        ModuleSearchParams,
    )


class IContentSearchRepository(Protocol):
    """Protocol for one content module's search primitive (forum, blog or wiki).

    Items are returned in the module's native shape; the normalizer maps
    them onto SearchResultItem.
    """

    async def search_module(self, params: ModuleSearchParams) -> ModuleSearchPage:
        """Return a page of items matching params.query plus the total match count."""

    async def title_completions(self, query: str, limit: int = 10) -> list[str]:
        """Return titles of the most popular visible items matching query."""


class ISearchAnalyticsRepository(Protocol):
    """Protocol for search analytics storage."""

    async def add_search_events(
        self, events: list[SearchEvent], client: ClientInfo
    ) -> int:
        """Persist search events; return number stored."""

    async def add_click_event(self, event: SearchClickEvent, client: ClientInfo) -> None:
        """Persist one result click."""

    async def list_between(
        self, start: datetime, end: datetime, limit: int = 10_000
    ) -> list[AnalyticsRecord]:
        """Return stored events with occurred_at in [start, end]."""
