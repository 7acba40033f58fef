"""Persistence models: ORM entities and mixins."""

from community_search.infrastructure.persistence.models.content import (
    BlogPost,
    ForumPost,
    WikiGuide,
)
from community_search.infrastructure.persistence.models.mixins import (
    AuthorMixin,
    CuidMixin,
    EngagementMixin,
    PublishedContentModel,
    SoftDeleteMixin,
    TimestampMixin,
)
from community_search.infrastructure.persistence.models.search_analytics import (
    SearchAnalyticsEvent,
)

__all__ = [
    "AuthorMixin",
    "BlogPost",
    "CuidMixin",
    "EngagementMixin",
    "ForumPost",
    "PublishedContentModel",
    "SearchAnalyticsEvent",
    "SoftDeleteMixin",
    "TimestampMixin",
    "WikiGuide",
]
