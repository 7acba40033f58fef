"""Query suggestion use case: completions, corrections and popular searches.

The three sub-pipelines are independent; a failure in one is logged and
leaves that category empty without affecting the others.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeVar

from community_search.application.dtos.suggestion import SuggestionBundle
from community_search.application.services.suggestion_vocabulary import popular_searches_for
from community_search.application.services.suggestions import (
    match_popular,
    rank_completions,
    suggest_corrections,
)
from community_search.domain.enums import ContentModule
from community_search.domain.exceptions import SuggestionsFailedException
from community_search.shared.telemetry.tracing import add_span_event, traced

if TYPE_CHECKING:
    from community_search.application.interfaces.repositories import IContentSearchRepository

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
DEFAULT_TITLE_FETCH_LIMIT = 10
DEFAULT_COMPLETION_LIMIT = 5

T = TypeVar("T")


def _run_pipeline(name: str, func: Callable[[], list[T]]) -> list[T]:
    try:
        return func()
    except Exception as e:
        logger.exception("Suggestion pipeline '%s' failed: %s", name, e)
        add_span_event("suggestions.pipeline_failed", {"pipeline": name})
        return []


class SuggestionService:
    """Suggestions for a partial query, optionally scoped to one module."""

    def __init__(
        self,
        repositories: Mapping[ContentModule, "IContentSearchRepository"],
        *,
        title_fetch_limit: int = DEFAULT_TITLE_FETCH_LIMIT,
        completion_limit: int = DEFAULT_COMPLETION_LIMIT,
    ) -> None:
        self.repositories = repositories
        self.title_fetch_limit = title_fetch_limit
        self.completion_limit = completion_limit

    async def _module_titles(self, module: ContentModule, query: str) -> list[str]:
        """Titles from one module that contain query; a failing module yields none."""
        try:
            titles = await self.repositories[module].title_completions(
                query, limit=self.title_fetch_limit
            )
        except Exception as e:
            logger.exception("%s title completions error: %s", module.value.capitalize(), e)
            return []
        query_lower = query.lower()
        return [title for title in titles if query_lower in title.lower()]

    async def completions(self, query: str, module: ContentModule | None = None) -> list[str]:
        """Top title completions from module, or from all modules concatenated in order."""
        modules = [module] if module is not None else list(ContentModule)
        per_module = await asyncio.gather(*(self._module_titles(m, query) for m in modules))
        titles = [title for titles in per_module for title in titles]
        return rank_completions(titles, query)[: self.completion_limit]

    @traced("search.suggestions")
    async def suggest(self, query: str, module: ContentModule | None = None) -> SuggestionBundle:
        """Return completions, corrections and popular searches for query.

        Queries shorter than two characters get an empty bundle.

        Raises:
            SuggestionsFailedException: On an error outside the sub-pipelines.
        """
        started = time.perf_counter()
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return SuggestionBundle()
        try:
            try:
                completions = await self.completions(query, module)
            except Exception as e:
                logger.exception("Suggestion pipeline 'completions' failed: %s", e)
                add_span_event("suggestions.pipeline_failed", {"pipeline": "completions"})
                completions = []
            corrections = _run_pipeline("corrections", lambda: suggest_corrections(query))
            popular = _run_pipeline(
                "popular", lambda: match_popular(query, popular_searches_for(module))
            )
        except Exception as e:
            elapsed = round((time.perf_counter() - started) * 1000)
            logger.exception("Suggestions failed after %d ms: %s", elapsed, e)
            raise SuggestionsFailedException(elapsed) from e
        return SuggestionBundle(
            completions=completions,
            corrections=corrections,
            popular=popular,
            search_time_ms=round((time.perf_counter() - started) * 1000),
        )
