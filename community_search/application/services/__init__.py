"""Application services: pure search building blocks.

Normalizer, relevance scorer, highlighter, facet aggregator, sorter and
suggestion helpers. None of them performs I/O.
"""

from community_search.application.services.facets import aggregate, date_bucket
from community_search.application.services.highlighter import highlight
from community_search.application.services.normalizer import (
    MODULE_PROFILES,
    generate_excerpt,
    normalize,
    resolve_status,
)
from community_search.application.services.relevance import query_terms, score
from community_search.application.services.sorter import sort_hint_for, sort_results
from community_search.application.services.suggestions import (
    is_single_edit,
    match_popular,
    rank_completions,
    suggest_corrections,
)

__all__ = [
    "MODULE_PROFILES",
    "aggregate",
    "date_bucket",
    "generate_excerpt",
    "highlight",
    "is_single_edit",
    "match_popular",
    "normalize",
    "query_terms",
    "rank_completions",
    "resolve_status",
    "score",
    "sort_hint_for",
    "sort_results",
    "suggest_corrections",
]
