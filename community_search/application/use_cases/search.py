"""Cross-module search use case.

Fans out to the forum, blog and wiki content repositories concurrently,
normalizes and scores their items, re-sorts the combined set, slices the
requested page and computes facets over everything that was fetched.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from community_search.application.dtos.search import (
    ModuleSearchParams,
    SearchFilters,
    SearchOutcome,
    SearchQuery,
    SearchResultItem,
)
from community_search.application.services.facets import (
    DEFAULT_AUTHOR_LIMIT,
    DEFAULT_TAG_LIMIT,
    aggregate,
)
from community_search.application.services.highlighter import (
    DEFAULT_FRAGMENT_LENGTH,
    DEFAULT_MAX_FRAGMENTS,
    highlight,
)
from community_search.application.services.normalizer import (
    DEFAULT_EXCERPT_LENGTH,
    MODULE_PROFILES,
    normalize,
    resolve_status,
)
from community_search.application.services.relevance import score
from community_search.application.services.sorter import sort_hint_for, sort_results
from community_search.domain.enums import ContentModule, SortKey
from community_search.domain.exceptions import SearchFailedException, ValidationException
from community_search.shared.telemetry.tracing import add_span_attributes, add_span_event, traced
from community_search.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from community_search.application.interfaces.repositories import IContentSearchRepository

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 500
MAX_LIMIT = 100


def _elapsed_ms(started: float) -> int:
    return round((time.perf_counter() - started) * 1000)


class SearchService:
    """Relevance search across forum posts, blog posts and wiki guides.

    By default every module is asked for its top offset + limit items and the
    combined, re-sorted set is sliced at offset, so consecutive pages line up.
    With overfetch=False each module instead receives ceil(limit / n) items at
    floor(offset / n) of its own ranking and the combined set is cut to limit
    without skipping again. That is an approximation: with skewed module sizes
    the returned page is not the exact global page. total_count only counts
    what was fetched. The final order always comes from re-sorting the
    combined set.
    """

    def __init__(
        self,
        repositories: Mapping[ContentModule, "IContentSearchRepository"],
        *,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
        fragment_length: int = DEFAULT_FRAGMENT_LENGTH,
        max_fragments: int = DEFAULT_MAX_FRAGMENTS,
        author_facet_limit: int = DEFAULT_AUTHOR_LIMIT,
        tag_facet_limit: int = DEFAULT_TAG_LIMIT,
        overfetch: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.repositories = repositories
        self.excerpt_length = excerpt_length
        self.fragment_length = fragment_length
        self.max_fragments = max_fragments
        self.author_facet_limit = author_facet_limit
        self.tag_facet_limit = tag_facet_limit
        self.overfetch = overfetch
        self.clock = clock

    @staticmethod
    def validate(query: SearchQuery) -> None:
        """Reject queries the repositories must never see.

        Raises:
            ValidationException: On empty/oversized q, or limit/offset out of range.
        """
        q = query.q.strip()
        if not q:
            raise ValidationException("Query is required", field="q")
        if len(q) > MAX_QUERY_LENGTH:
            raise ValidationException("Query too long", field="q")
        if not 1 <= query.limit <= MAX_LIMIT:
            raise ValidationException(f"limit must be between 1 and {MAX_LIMIT}", field="limit")
        if query.offset < 0:
            raise ValidationException("offset must be >= 0", field="offset")

    @staticmethod
    def target_modules(filters: SearchFilters) -> list[ContentModule]:
        """Requested modules in request order without duplicates; all modules when none given."""
        if not filters.modules:
            return list(ContentModule)
        return list(dict.fromkeys(filters.modules))

    def _module_params(
        self, module: ContentModule, query: SearchQuery, module_count: int
    ) -> ModuleSearchParams:
        filters = query.filters
        difficulty = None
        if MODULE_PROFILES[module].supports_difficulty and filters.difficulty:
            difficulty = filters.difficulty[0]
        if self.overfetch:
            limit, offset = query.offset + query.limit, 0
        else:
            limit = math.ceil(query.limit / module_count)
            offset = query.offset // module_count
        return ModuleSearchParams(
            query=query.q.strip(),
            categories=filters.categories,
            tags=filters.tags,
            authors=filters.authors,
            status=resolve_status(module, filters.status),
            difficulty=difficulty,
            date_range=query.date_range,
            sort_hint=sort_hint_for(query.sort),
            limit=limit,
            offset=offset,
        )

    async def _fetch_module(
        self, module: ContentModule, params: ModuleSearchParams
    ) -> list[dict]:
        """Fetch one module's raw items; a failing module yields no items."""
        try:
            page = await self.repositories[module].search_module(params)
        except Exception as e:
            logger.exception("Search error in %s module: %s", module.value, e)
            add_span_event("search.module_failed", {"module": module.value})
            return []
        return list(page.items)

    def _build_results(
        self,
        module: ContentModule,
        raw_items: list[dict],
        query: SearchQuery,
        now: datetime,
    ) -> list[SearchResultItem]:
        results: list[SearchResultItem] = []
        for raw in raw_items:
            try:
                item = normalize(raw, module, self.excerpt_length)
            except ValidationException as e:
                logger.warning("Skipping malformed %s item: %s", module.value, e.message)
                continue
            highlights = (
                highlight(item, query.q, self.fragment_length, self.max_fragments)
                if query.highlight
                else None
            )
            results.append(
                replace(item, score=score(item, query.q, now), highlights=highlights)
            )
        return results

    @traced("search.cross_module")
    async def search(self, query: SearchQuery) -> SearchOutcome:
        """Run the search described by query and return one page plus facets.

        Raises:
            ValidationException: If the query fails validation (nothing is fetched).
            SearchFailedException: On any error outside the per-module fetches.
        """
        self.validate(query)
        started = time.perf_counter()
        try:
            modules = self.target_modules(query.filters)
            add_span_attributes(
                modules=",".join(m.value for m in modules),
                limit=query.limit,
                offset=query.offset,
                sort=SortKey.parse(query.sort).value,
            )
            now = self.clock()
            raw_pages = await asyncio.gather(
                *(
                    self._fetch_module(module, self._module_params(module, query, len(modules)))
                    for module in modules
                )
            )
            combined: list[SearchResultItem] = []
            for module, raw_items in zip(modules, raw_pages):
                combined.extend(self._build_results(module, raw_items, query, now))

            ordered = sort_results(combined, query.sort)
            # Divided budgets already skipped the offset inside each store.
            start = query.offset if self.overfetch else 0
            page = ordered[start : start + query.limit]
            facets = (
                aggregate(combined, now, self.author_facet_limit, self.tag_facet_limit)
                if query.facets
                else None
            )
        except Exception as e:
            elapsed = _elapsed_ms(started)
            logger.exception("Search failed after %d ms: %s", elapsed, e)
            raise SearchFailedException(elapsed, str(e)) from e

        elapsed = _elapsed_ms(started)
        logger.debug(
            "Search over %s returned %d/%d results in %d ms",
            [m.value for m in modules],
            len(page),
            len(combined),
            elapsed,
        )
        return SearchOutcome(
            results=page,
            total_count=len(combined),
            search_time_ms=elapsed,
            facets=facets,
        )
