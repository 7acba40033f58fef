"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from community_search.domain.enums import (
    ContentModule,
    ContentStatus,
    Difficulty,
    HighlightField,
    ResultKind,
    SortHint,
    SortKey,
)
from community_search.domain.exceptions import (
    CommunitySearchException,
    SearchFailedException,
    SqlNotConfiguredException,
    SuggestionsFailedException,
    ValidationException,
)

__all__ = [
    "CommunitySearchException",
    "ContentModule",
    "ContentStatus",
    "Difficulty",
    "HighlightField",
    "ResultKind",
    "SearchFailedException",
    "SortHint",
    "SortKey",
    "SqlNotConfiguredException",
    "SuggestionsFailedException",
    "ValidationException",
]
