"""Search API schemas (request body, result items, facets, suggestions).

Responses serialize with camelCase keys; requests accept camelCase or
snake_case. date_range keeps its snake_case name on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from community_search.application.dtos.search import (
    DateRange,
    FacetItem,
    SearchFacets,
    SearchFilters,
    SearchOutcome,
    SearchQuery,
    SearchResultItem,
)
from community_search.application.dtos.suggestion import SuggestionBundle
from community_search.domain.enums import (
    ContentModule,
    ContentStatus,
    Difficulty,
    HighlightField,
    ResultKind,
    SortKey,
)


class CamelModel(BaseModel):
    """Base for wire models: camelCase aliases, population by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchFiltersRequest(CamelModel):
    modules: list[ContentModule] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    difficulty: list[Difficulty] = Field(default_factory=list)
    status: list[ContentStatus] = Field(default_factory=list)

    def to_dto(self) -> SearchFilters:
        return SearchFilters(
            modules=tuple(self.modules),
            authors=tuple(self.authors),
            categories=tuple(self.categories),
            tags=tuple(self.tags),
            difficulty=tuple(d.value for d in self.difficulty),
            status=tuple(s.value for s in self.status),
        )


class DateRangeRequest(BaseModel):
    """Inclusive creation-date window; either bound may be omitted."""

    model_config = ConfigDict(populate_by_name=True)

    from_: datetime | None = Field(default=None, alias="from")
    to: datetime | None = None


class SearchRequest(CamelModel):
    """Body of POST /search."""

    q: str = Field(..., min_length=1, max_length=500)
    filters: SearchFiltersRequest = Field(default_factory=SearchFiltersRequest)
    sort: str = Field(
        default=SortKey.RELEVANCE.value,
        description="relevance | date-desc | date-asc | views-desc | likes-desc | "
        "title-asc | author-asc (unknown values sort by relevance)",
    )
    date_range: DateRangeRequest | None = Field(default=None, alias="date_range")
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    highlight: bool = True
    facets: bool = True

    @field_validator("sort")
    @classmethod
    def known_sort(cls, value: str) -> str:
        """Echo the sort actually applied: unknown keys become relevance."""
        return SortKey.parse(value).value

    def to_query(self) -> SearchQuery:
        date_range = None
        if self.date_range is not None:
            date_range = DateRange(start=self.date_range.from_, end=self.date_range.to)
        return SearchQuery(
            q=self.q,
            filters=self.filters.to_dto(),
            sort=SortKey.parse(self.sort),
            date_range=date_range,
            limit=self.limit,
            offset=self.offset,
            highlight=self.highlight,
            facets=self.facets,
        )


class AuthorResponse(CamelModel):
    id: str
    name: str
    avatar: str | None = None


class StatsResponse(CamelModel):
    views_count: int
    likes_count: int
    replies_count: int | None = None


class HighlightResponse(CamelModel):
    field: HighlightField
    fragments: list[str]


class SearchResultItemResponse(CamelModel):
    """One normalized, scored result."""

    id: str
    module: ContentModule
    kind: ResultKind = Field(..., alias="type")
    title: str
    excerpt: str
    content: str | None = None
    author: AuthorResponse
    category: str
    tags: list[str]
    stats: StatsResponse
    created_at: datetime
    updated_at: datetime
    slug: str
    score: int | None = None
    highlights: list[HighlightResponse] | None = None
    difficulty: str | None = None

    @classmethod
    def from_dto(cls, item: SearchResultItem) -> "SearchResultItemResponse":
        return cls(
            id=item.id,
            module=item.module,
            kind=item.kind,
            title=item.title,
            excerpt=item.excerpt,
            content=item.content,
            author=AuthorResponse(
                id=item.author.id, name=item.author.name, avatar=item.author.avatar
            ),
            category=item.category,
            tags=list(item.tags),
            stats=StatsResponse(
                views_count=item.stats.views_count,
                likes_count=item.stats.likes_count,
                replies_count=item.stats.replies_count,
            ),
            created_at=item.created_at,
            updated_at=item.updated_at,
            slug=item.slug,
            score=item.score,
            highlights=(
                [HighlightResponse(field=h.field, fragments=list(h.fragments)) for h in item.highlights]
                if item.highlights is not None
                else None
            ),
            difficulty=item.difficulty,
        )


class FacetItemResponse(CamelModel):
    value: str
    count: int
    label: str


def _facet_list(items: tuple[FacetItem, ...]) -> list[FacetItemResponse]:
    return [FacetItemResponse(value=f.value, count=f.count, label=f.label) for f in items]


class SearchFacetsResponse(CamelModel):
    modules: list[FacetItemResponse]
    categories: list[FacetItemResponse]
    authors: list[FacetItemResponse]
    tags: list[FacetItemResponse]
    date_ranges: list[FacetItemResponse]

    @classmethod
    def from_dto(cls, facets: SearchFacets) -> "SearchFacetsResponse":
        return cls(
            modules=_facet_list(facets.modules),
            categories=_facet_list(facets.categories),
            authors=_facet_list(facets.authors),
            tags=_facet_list(facets.tags),
            date_ranges=_facet_list(facets.date_ranges),
        )


class SearchResponse(CamelModel):
    """Response of POST /search: one page, totals, facets and the echoed query."""

    results: list[SearchResultItemResponse]
    total_count: int
    search_time: int = Field(..., description="Milliseconds spent searching")
    facets: SearchFacetsResponse | None = None
    query: SearchRequest

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome, request: SearchRequest) -> "SearchResponse":
        return cls(
            results=[SearchResultItemResponse.from_dto(r) for r in outcome.results],
            total_count=outcome.total_count,
            search_time=outcome.search_time_ms,
            facets=(
                SearchFacetsResponse.from_dto(outcome.facets)
                if outcome.facets is not None
                else None
            ),
            query=request,
        )


class SuggestionsResponse(CamelModel):
    """Response of GET /search/suggestions."""

    completions: list[str] = Field(default_factory=list)
    corrections: list[str] = Field(default_factory=list)
    popular: list[str] = Field(default_factory=list)
    search_time: int = 0

    @classmethod
    def from_bundle(cls, bundle: SuggestionBundle) -> "SuggestionsResponse":
        return cls(
            completions=list(bundle.completions),
            corrections=list(bundle.corrections),
            popular=list(bundle.popular),
            search_time=bundle.search_time_ms,
        )
