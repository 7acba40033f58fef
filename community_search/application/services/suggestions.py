"""Pure suggestion helpers: completion ranking, typo correction, popular searches."""

from collections.abc import Iterable, Mapping, Sequence

from community_search.application.services.suggestion_vocabulary import (
    COMMON_CORRECTIONS,
    COMMON_WORDS,
)

MAX_CORRECTIONS = 2
MAX_POPULAR = 3
# Typo scan only runs for queries longer than this
MIN_TYPO_QUERY_LENGTH = 4


def rank_completions(titles: Iterable[str], query: str) -> list[str]:
    """Return matching titles, de-duplicated case-insensitively (first wins) and ranked.

    Order: exact match, then prefix matches, then earlier match position,
    then shorter titles. Titles not containing query are dropped.
    """
    query_lower = query.lower()
    seen: set[str] = set()
    unique: list[str] = []
    for title in titles:
        title_lower = title.lower()
        if query_lower not in title_lower or title_lower in seen:
            continue
        seen.add(title_lower)
        unique.append(title)

    def rank(title: str) -> tuple[bool, bool, int, int]:
        title_lower = title.lower()
        return (
            title_lower != query_lower,
            not title_lower.startswith(query_lower),
            title_lower.find(query_lower),
            len(title),
        )

    return sorted(unique, key=rank)


def is_single_edit(word: str, target: str) -> bool:
    """True if word differs from target by exactly one substitution, insertion or deletion."""
    if word == target or abs(len(word) - len(target)) > 1:
        return False
    if len(word) == len(target):
        return sum(a != b for a, b in zip(word, target)) == 1
    shorter, longer = sorted((word, target), key=len)
    for i in range(len(longer)):
        if longer[:i] + longer[i + 1:] == shorter:
            return True
    return False


def suggest_corrections(
    query: str,
    corrections: Mapping[str, str] = COMMON_CORRECTIONS,
    common_words: Sequence[str] = COMMON_WORDS,
) -> list[str]:
    """Return at most two spelling corrections for query.

    A misspelling-table hit on any word yields the whole query with those
    words corrected. Otherwise, for queries longer than three characters,
    the first common word one edit away from the query is suggested.
    """
    words = query.lower().split()
    corrected = [corrections.get(word, word) for word in words]
    suggestions: list[str] = []
    if corrected != words:
        suggestions.append(" ".join(corrected))

    query_lower = query.lower().strip()
    if not suggestions and len(query_lower) >= MIN_TYPO_QUERY_LENGTH:
        for word in common_words:
            if is_single_edit(query_lower, word):
                suggestions.append(word)
                break

    return suggestions[:MAX_CORRECTIONS]


def match_popular(query: str, popular: Sequence[str]) -> list[str]:
    """Return up to three popular searches that contain query."""
    query_lower = query.lower()
    return [search for search in popular if query_lower in search][:MAX_POPULAR]
