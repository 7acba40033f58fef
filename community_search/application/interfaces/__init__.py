"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from community_search.infrastructure.
"""

from community_search.application.interfaces.repositories import (
    IContentSearchRepository,
    ISearchAnalyticsRepository,
)

__all__ = [
    "IContentSearchRepository",
    "ISearchAnalyticsRepository",
]
