"""Relevance scorer unit tests (text match weights, engagement, recency)."""

import math

from community_search.application.services.relevance import query_terms, score
from tests.factories import NOW, make_item


def test_query_terms_drop_short_words() -> None:
    """Terms of two characters or fewer are ignored; the rest are lowercased."""
    assert query_terms("How to BUILD a Redstone farm") == ["how", "build", "redstone", "farm"]
    assert query_terms("an of") == []


def test_title_match_outranks_content_match() -> None:
    """Title containing both terms beats an item mentioning them only in content."""
    titled = make_item("a", title="Redstone Farm Tutorial")
    body_only = make_item("b", title="Mob grinder", content="a redstone farm next to a redstone clock")

    titled_score = score(titled, "redstone farm", NOW)
    body_score = score(body_only, "redstone farm", NOW)

    assert titled_score == 80 + 60
    assert body_score == 3 * 10
    assert titled_score > body_score


def test_exact_title_match_scores_highest_weight() -> None:
    """A title equal to a term or to the whole query earns the exact weight per term."""
    assert score(make_item(title="Redstone"), "redstone", NOW) == 100
    assert score(make_item(title="Redstone Farm"), "redstone farm", NOW) == 200


def test_excerpt_adds_per_term() -> None:
    item = make_item(title="Guide", excerpt="Everything about redstone and farms")
    assert score(item, "redstone farm", NOW) == 2 * 30


def test_content_counts_non_overlapping_occurrences() -> None:
    item = make_item(title="x", content="aaaa")
    assert score(item, "aaa", NOW) == 10


def test_engagement_boost_is_logarithmic() -> None:
    """views 99 and likes 9 give 5*2 + 10*1; replies add 8*log10(replies+1)."""
    assert score(make_item(title="x", views=99, likes=9), "zzz", NOW) == 20
    assert score(make_item(title="x", views=99, likes=9, replies=9), "zzz", NOW) == 28


def test_recency_boost_bands() -> None:
    assert score(make_item(title="x", age_days=3), "zzz", NOW) == 20
    assert score(make_item(title="x", age_days=10), "zzz", NOW) == 10
    assert score(make_item(title="x", age_days=30), "zzz", NOW) == 0


def test_score_rounds_half_up() -> None:
    """10 * log10(likes + 1) rounds to the nearest integer."""
    likes = 2
    expected = math.floor(10 * math.log10(likes + 1) + 0.5)
    assert score(make_item(title="x", likes=likes), "zzz", NOW) == expected


def test_score_is_deterministic() -> None:
    item = make_item(title="Redstone basics", content="redstone dust", views=1234, likes=56, age_days=5)
    assert score(item, "redstone", NOW) == score(item, "redstone", NOW)


def test_adding_query_term_to_title_never_lowers_score() -> None:
    without = make_item(title="Farm", content="redstone")
    with_term = make_item(title="Redstone Farm", content="redstone")
    assert score(with_term, "redstone farm", NOW) >= score(without, "redstone farm", NOW)


def test_short_terms_do_not_contribute() -> None:
    item = make_item(title="a", content="a a a")
    assert score(item, "a", NOW) == 0
