"""Relevance scorer: explainable heuristic combining text match, engagement and recency.

Pure and deterministic: "now" is passed in rather than read from the clock.
"""

import math
from datetime import datetime

from community_search.application.dtos.search import SearchResultItem
from community_search.shared.utils.datetime import days_between

MIN_TERM_LENGTH = 3

TITLE_EXACT_WEIGHT = 100
TITLE_PREFIX_WEIGHT = 80
TITLE_CONTAINS_WEIGHT = 60
EXCERPT_WEIGHT = 30
CONTENT_OCCURRENCE_WEIGHT = 10

VIEWS_BOOST = 5
LIKES_BOOST = 10
REPLIES_BOOST = 8

# (max age in days, boost), checked in order
RECENCY_BOOSTS: tuple[tuple[int, int], ...] = ((7, 20), (30, 10))


def query_terms(query: str) -> list[str]:
    """Lowercase whitespace-split terms, dropping those of two characters or fewer."""
    return [term for term in query.lower().split() if len(term) >= MIN_TERM_LENGTH]


def _title_score(title: str, terms: list[str]) -> int:
    title_lower = title.lower()
    whole_query = " ".join(terms)
    total = 0
    for term in terms:
        if term not in title_lower:
            continue
        if title_lower in (term, whole_query):
            total += TITLE_EXACT_WEIGHT
        elif title_lower.startswith(term):
            total += TITLE_PREFIX_WEIGHT
        else:
            total += TITLE_CONTAINS_WEIGHT
    return total


def _engagement_boost(item: SearchResultItem) -> float:
    stats = item.stats
    boost = VIEWS_BOOST * math.log10(stats.views_count + 1)
    boost += LIKES_BOOST * math.log10(stats.likes_count + 1)
    if stats.replies_count:
        boost += REPLIES_BOOST * math.log10(stats.replies_count + 1)
    return boost


def _recency_boost(created_at: datetime, now: datetime) -> int:
    age = days_between(created_at, now)
    for max_days, boost in RECENCY_BOOSTS:
        if age < max_days:
            return boost
    return 0


def score(item: SearchResultItem, query: str, now: datetime) -> int:
    """Return the relevance score of item for query at time now (higher is better).

    Items that match no term can still score from engagement and recency;
    true non-matches are expected to be excluded by the repository query.
    """
    terms = query_terms(query)
    total: float = _title_score(item.title, terms)

    if item.excerpt:
        excerpt_lower = item.excerpt.lower()
        total += sum(EXCERPT_WEIGHT for term in terms if term in excerpt_lower)

    if item.content:
        content_lower = item.content.lower()
        total += sum(
            CONTENT_OCCURRENCE_WEIGHT * content_lower.count(term) for term in terms
        )

    total += _engagement_boost(item)
    total += _recency_boost(item.created_at, now)
    # Half-up rounding: 12.5 -> 13.
    return max(0, math.floor(total + 0.5))
