"""Domain enumerations for community search.

Enums represent fixed sets of domain values (content modules, sort keys,
content status).
"""

from enum import Enum


class ContentModule(str, Enum):
    """Content domain a search result comes from.

    Tags provenance of a result; never changes after normalization.
    """

    FORUM = "forum"
    BLOG = "blog"
    WIKI = "wiki"


class ResultKind(str, Enum):
    """Sub-type of a result within its module (wiki emits guides, others posts)."""

    POST = "post"
    GUIDE = "guide"
    REPLY = "reply"


class SortKey(str, Enum):
    """Ordering applied to the combined, cross-module result set."""

    RELEVANCE = "relevance"
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    VIEWS_DESC = "views-desc"
    LIKES_DESC = "likes-desc"
    TITLE_ASC = "title-asc"
    AUTHOR_ASC = "author-asc"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        """Return the matching key; unknown or empty values fall back to RELEVANCE."""
        if isinstance(value, SortKey):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RELEVANCE


class SortHint(str, Enum):
    """Ordering hint passed to a module's content repository."""

    LATEST = "latest"
    POPULAR = "popular"
    VIEWS = "views"


class ContentStatus(str, Enum):
    """Publication status a search request can filter on."""

    PUBLISHED = "published"
    DRAFT = "draft"
    ARCHIVED = "archived"


class Difficulty(str, Enum):
    """Wiki guide difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class HighlightField(str, Enum):
    """Field a highlight fragment was extracted from."""

    TITLE = "title"
    CONTENT = "content"
    EXCERPT = "excerpt"
