"""DTOs for cross-module search (no dependency on ORM or HTTP schemas)."""

from dataclasses import dataclass, field
from datetime import datetime

from community_search.domain.enums import (
    ContentModule,
    HighlightField,
    ResultKind,
    SortHint,
    SortKey,
)


@dataclass(frozen=True)
class AuthorRef:
    """Author as embedded in a content item."""

    id: str
    name: str
    avatar: str | None = None


@dataclass(frozen=True)
class ContentStats:
    """Engagement counters. replies_count is only meaningful for forum posts."""

    views_count: int = 0
    likes_count: int = 0
    replies_count: int | None = None


@dataclass(frozen=True)
class Highlight:
    """Marked fragments extracted from one field of a result."""

    field: HighlightField
    fragments: tuple[str, ...]


@dataclass(frozen=True)
class SearchResultItem:
    """Unified, module-tagged search hit (read-model).

    module + slug identify a result; id is only unique within its module.
    score and highlights are None until scoring/highlighting has run.
    """

    id: str
    module: ContentModule
    kind: ResultKind
    title: str
    excerpt: str
    author: AuthorRef
    category: str
    created_at: datetime
    updated_at: datetime
    slug: str
    content: str | None = None
    tags: tuple[str, ...] = ()
    stats: ContentStats = field(default_factory=ContentStats)
    score: int | None = None
    highlights: tuple[Highlight, ...] | None = None
    difficulty: str | None = None


@dataclass(frozen=True)
class FacetItem:
    """One bucket of a facet group."""

    value: str
    count: int
    label: str


@dataclass(frozen=True)
class SearchFacets:
    """Grouped counts over the whole matched set (computed before pagination)."""

    modules: tuple[FacetItem, ...] = ()
    categories: tuple[FacetItem, ...] = ()
    authors: tuple[FacetItem, ...] = ()
    tags: tuple[FacetItem, ...] = ()
    date_ranges: tuple[FacetItem, ...] = ()


@dataclass(frozen=True)
class DateRange:
    """Inclusive created-at window; either bound may be open."""

    start: datetime | None = None
    end: datetime | None = None


@dataclass(frozen=True)
class SearchFilters:
    """Request filters. Empty tuples mean 'no constraint'."""

    modules: tuple[ContentModule, ...] = ()
    authors: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    difficulty: tuple[str, ...] = ()
    status: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchQuery:
    """A validated search request."""

    q: str
    filters: SearchFilters = field(default_factory=SearchFilters)
    sort: SortKey = SortKey.RELEVANCE
    date_range: DateRange | None = None
    limit: int = 20
    offset: int = 0
    highlight: bool = True
    facets: bool = True


@dataclass(frozen=True)
class ModuleSearchParams:
    """Arguments for one module's content repository search."""

    query: str
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    authors: tuple[str, ...] = ()
    status: str = "published"
    difficulty: str | None = None
    date_range: DateRange | None = None
    sort_hint: SortHint = SortHint.LATEST
    limit: int = 20
    offset: int = 0


@dataclass(frozen=True)
class ModuleSearchPage:
    """A page of raw module items (native shape) plus the store's match count."""

    items: list[dict]
    total: int = 0


@dataclass(frozen=True)
class SearchOutcome:
    """Result of SearchService.search."""

    results: list[SearchResultItem]
    total_count: int
    search_time_ms: int
    facets: SearchFacets | None = None
