"""Highlighter: marks query terms in titles and extracts windows from bodies.

Fragments are HTML: matched terms are wrapped in <mark>…</mark> and the
surrounding text is escaped, so user content cannot inject markup. Terms
are passed through re.escape before any pattern is compiled.
"""

import html
import re

from community_search.application.dtos.search import Highlight, SearchResultItem
from community_search.application.services.relevance import query_terms
from community_search.domain.enums import HighlightField
from community_search.shared.utils.sanitization import strip_html

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"
ELLIPSIS = "..."
DEFAULT_FRAGMENT_LENGTH = 150
DEFAULT_MAX_FRAGMENTS = 3


def _terms_pattern(terms: list[str]) -> re.Pattern[str]:
    # Longest first so overlapping terms mark the longer match.
    alternatives = sorted({re.escape(term) for term in terms}, key=len, reverse=True)
    return re.compile("|".join(alternatives), re.IGNORECASE)


def mark_terms(text: str, pattern: re.Pattern[str]) -> tuple[str, int]:
    """Escape text and wrap every match of pattern in a marker.

    Returns:
        The marked HTML string and the number of markers inserted.
    """
    parts: list[str] = []
    last = 0
    count = 0
    for match in pattern.finditer(text):
        if match.start() == match.end():
            continue
        parts.append(html.escape(text[last:match.start()]))
        parts.append(f"{MARK_OPEN}{html.escape(match.group())}{MARK_CLOSE}")
        last = match.end()
        count += 1
    parts.append(html.escape(text[last:]))
    return "".join(parts), count


def extract_fragments(
    text: str,
    terms: list[str],
    fragment_length: int = DEFAULT_FRAGMENT_LENGTH,
    max_fragments: int = DEFAULT_MAX_FRAGMENTS,
) -> list[str]:
    """Return up to max_fragments marked windows, one per term found in text.

    Each window starts half a window before the term's first occurrence
    (clamped to 0) and is fragment_length characters long; '...' marks a
    window that does not start at the beginning or reach the end of text.
    """
    fragments: list[str] = []
    for term in terms:
        if len(fragments) >= max_fragments:
            break
        # Matched on the original text so case folding cannot shift indexes.
        match = re.search(re.escape(term), text, re.IGNORECASE)
        if match is None:
            continue
        index = match.start()
        start = max(0, index - fragment_length // 2)
        end = min(len(text), start + fragment_length)
        fragment, marked = mark_terms(text[start:end], _terms_pattern([term]))
        if not marked:
            continue
        if start > 0:
            fragment = ELLIPSIS + fragment
        if end < len(text):
            fragment = fragment + ELLIPSIS
        fragments.append(fragment)
    return fragments


def highlight(
    item: SearchResultItem,
    query: str,
    fragment_length: int = DEFAULT_FRAGMENT_LENGTH,
    max_fragments: int = DEFAULT_MAX_FRAGMENTS,
) -> tuple[Highlight, ...]:
    """Return title and body highlights for item; fields without matches are omitted."""
    terms = query_terms(query)
    if not terms:
        return ()
    highlights: list[Highlight] = []

    if item.title:
        marked_title, marked = mark_terms(item.title, _terms_pattern(terms))
        if marked:
            highlights.append(Highlight(field=HighlightField.TITLE, fragments=(marked_title,)))

    body_field = HighlightField.CONTENT if item.content else HighlightField.EXCERPT
    body = strip_html(item.content) if item.content else item.excerpt
    if body:
        fragments = extract_fragments(body, terms, fragment_length, max_fragments)
        if fragments:
            highlights.append(Highlight(field=body_field, fragments=tuple(fragments)))

    return tuple(highlights)
