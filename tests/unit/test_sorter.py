"""Result sorter unit tests."""

import pytest

from community_search.application.services.sorter import sort_hint_for, sort_results
from community_search.domain.enums import SortHint, SortKey
from tests.factories import make_item


def _ids(results) -> list[str]:
    return [r.id for r in results]


def test_relevance_sorts_by_score_desc_and_keeps_ties_stable() -> None:
    items = [
        make_item("a", score=10),
        make_item("b", score=30),
        make_item("c", score=10),
        make_item("d", score=20),
    ]
    assert _ids(sort_results(items, SortKey.RELEVANCE)) == ["b", "d", "a", "c"]


def test_sort_does_not_mutate_input() -> None:
    items = [make_item("a", score=1), make_item("b", score=2)]
    sort_results(items, SortKey.RELEVANCE)
    assert _ids(items) == ["a", "b"]


def test_date_sorts() -> None:
    items = [make_item("mid", age_days=10), make_item("new", age_days=1), make_item("old", age_days=100)]
    assert _ids(sort_results(items, SortKey.DATE_DESC)) == ["new", "mid", "old"]
    assert _ids(sort_results(items, SortKey.DATE_ASC)) == ["old", "mid", "new"]


def test_engagement_sorts() -> None:
    items = [
        make_item("a", views=5, likes=50),
        make_item("b", views=50, likes=5),
        make_item("c", views=20, likes=20),
    ]
    assert _ids(sort_results(items, SortKey.VIEWS_DESC)) == ["b", "c", "a"]
    assert _ids(sort_results(items, SortKey.LIKES_DESC)) == ["a", "c", "b"]


def test_title_sort_ignores_case() -> None:
    items = [make_item("c", title="cherry"), make_item("b", title="Banana"), make_item("a", title="apple")]
    assert _ids(sort_results(items, SortKey.TITLE_ASC)) == ["a", "b", "c"]


def test_author_sort() -> None:
    items = [make_item("1", author="zed"), make_item("2", author="Amy"), make_item("3", author="bob")]
    assert _ids(sort_results(items, SortKey.AUTHOR_ASC)) == ["2", "3", "1"]


@pytest.mark.parametrize("key", ["bogus", "", None])
def test_unknown_key_falls_back_to_relevance(key) -> None:
    items = [make_item("a", score=1), make_item("b", score=5)]
    assert _ids(sort_results(items, key)) == ["b", "a"]


def test_string_keys_are_accepted() -> None:
    items = [make_item("a", views=1), make_item("b", views=9)]
    assert _ids(sort_results(items, "views-desc")) == ["b", "a"]


@pytest.mark.parametrize(
    ("key", "hint"),
    [
        (SortKey.DATE_DESC, SortHint.LATEST),
        (SortKey.VIEWS_DESC, SortHint.VIEWS),
        (SortKey.LIKES_DESC, SortHint.POPULAR),
        (SortKey.RELEVANCE, SortHint.LATEST),
        (SortKey.TITLE_ASC, SortHint.LATEST),
    ],
)
def test_sort_hint_for(key: SortKey, hint: SortHint) -> None:
    assert sort_hint_for(key) == hint
