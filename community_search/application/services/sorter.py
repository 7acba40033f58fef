"""Result sorter for the combined cross-module result set.

sorted() is stable, so items with equal keys keep their pre-sort order.
"""

import locale
from collections.abc import Callable, Iterable
from typing import Any

from community_search.application.dtos.search import SearchResultItem
from community_search.domain.enums import SortHint, SortKey


def _text_key(value: str) -> str:
    return locale.strxfrm(value.casefold())


# sort key -> (key function, descending)
_ORDERINGS: dict[SortKey, tuple[Callable[[SearchResultItem], Any], bool]] = {
    SortKey.RELEVANCE: (lambda item: item.score or 0, True),
    SortKey.DATE_DESC: (lambda item: item.created_at, True),
    SortKey.DATE_ASC: (lambda item: item.created_at, False),
    SortKey.VIEWS_DESC: (lambda item: item.stats.views_count, True),
    SortKey.LIKES_DESC: (lambda item: item.stats.likes_count, True),
    SortKey.TITLE_ASC: (lambda item: _text_key(item.title), False),
    SortKey.AUTHOR_ASC: (lambda item: _text_key(item.author.name), False),
}

_SORT_HINTS: dict[SortKey, SortHint] = {
    SortKey.DATE_DESC: SortHint.LATEST,
    SortKey.VIEWS_DESC: SortHint.VIEWS,
    SortKey.LIKES_DESC: SortHint.POPULAR,
}


def sort_results(
    results: Iterable[SearchResultItem], sort_key: SortKey | str | None
) -> list[SearchResultItem]:
    """Return a new list of results ordered by sort_key (unknown keys sort by relevance)."""
    key_func, descending = _ORDERINGS[SortKey.parse(sort_key)]
    return sorted(results, key=key_func, reverse=descending)


def sort_hint_for(sort_key: SortKey | str | None) -> SortHint:
    """Return the repository ordering hint that best matches sort_key."""
    return _SORT_HINTS.get(SortKey.parse(sort_key), SortHint.LATEST)
