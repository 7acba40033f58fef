"""Facet aggregator: grouped counts over a combined result set."""

from collections import Counter
from collections.abc import Callable, Iterable
from datetime import datetime

from community_search.application.dtos.search import (
    FacetItem,
    SearchFacets,
    SearchResultItem,
)

DEFAULT_AUTHOR_LIMIT = 10
DEFAULT_TAG_LIMIT = 15

# (upper bound in whole days, label), in canonical display order
DATE_BUCKETS: tuple[tuple[int, str], ...] = (
    (7, "Past week"),
    (30, "Past month"),
    (90, "Past 3 months"),
    (180, "Past 6 months"),
)
OLDER_BUCKET = "6+ months ago"
DATE_BUCKET_ORDER: tuple[str, ...] = tuple(label for _, label in DATE_BUCKETS) + (OLDER_BUCKET,)


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def _ranked(
    counts: Counter[str],
    label: Callable[[str], str] = lambda value: value,
    limit: int | None = None,
) -> tuple[FacetItem, ...]:
    # Counter keeps first-occurrence order and sorted() is stable, so ties keep it too.
    ordered = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
    if limit is not None:
        ordered = ordered[:limit]
    return tuple(FacetItem(value=value, count=count, label=label(value)) for value, count in ordered)


def date_bucket(created_at: datetime, now: datetime) -> str:
    """Return the date-range label for an item created at created_at."""
    days = (now - created_at).days
    for max_days, label in DATE_BUCKETS:
        if days <= max_days:
            return label
    return OLDER_BUCKET


def aggregate(
    results: Iterable[SearchResultItem],
    now: datetime,
    author_limit: int = DEFAULT_AUTHOR_LIMIT,
    tag_limit: int = DEFAULT_TAG_LIMIT,
) -> SearchFacets:
    """Compute module, category, author, tag and date-range facets for results.

    Counts are sorted descending (ties in first-occurrence order), except
    date ranges which follow DATE_BUCKET_ORDER. Empty buckets are omitted.
    """
    modules: Counter[str] = Counter()
    categories: Counter[str] = Counter()
    authors: Counter[str] = Counter()
    tags: Counter[str] = Counter()
    date_ranges: Counter[str] = Counter()

    for result in results:
        modules[result.module.value] += 1
        if result.category:
            categories[result.category] += 1
        if result.author.name:
            authors[result.author.name] += 1
        for tag in result.tags:
            tags[tag] += 1
        date_ranges[date_bucket(result.created_at, now)] += 1

    return SearchFacets(
        modules=_ranked(modules, label=_capitalize),
        categories=_ranked(categories, label=_capitalize),
        authors=_ranked(authors, limit=author_limit),
        tags=_ranked(tags, limit=tag_limit),
        date_ranges=tuple(
            FacetItem(value=label, count=date_ranges[label], label=label)
            for label in DATE_BUCKET_ORDER
            if date_ranges[label]
        ),
    )
