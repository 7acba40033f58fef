"""Result normalizer: maps each module's native item shape onto SearchResultItem.

Module differences (category field name, result kind, status vocabulary,
difficulty support) live in MODULE_PROFILES, an enum-keyed table; adding a
content module is one entry there plus a repository binding.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from community_search.application.dtos.search import (
    AuthorRef,
    ContentStats,
    SearchResultItem,
)
from community_search.domain.enums import ContentModule, ContentStatus, ResultKind
from community_search.domain.exceptions import ValidationException
from community_search.shared.utils.datetime import parse_timestamp
from community_search.shared.utils.sanitization import strip_html

DEFAULT_EXCERPT_LENGTH = 200
# Break at the last space only if it keeps at least this share of the budget.
EXCERPT_BREAK_RATIO = 0.8
ELLIPSIS = "..."


def _forum_status(requested: tuple[str, ...]) -> str:
    # Forum posts are 'active' (not deleted, not locked) rather than published.
    return "active" if ContentStatus.PUBLISHED.value in requested else "all"


def _publishable_status(requested: tuple[str, ...]) -> str:
    return requested[0] if requested else ContentStatus.PUBLISHED.value


@dataclass(frozen=True)
class ModuleProfile:
    """Per-module normalization and filter rules."""

    kind: ResultKind
    category_key: str
    resolve_status: Callable[[tuple[str, ...]], str]
    supports_difficulty: bool = False


MODULE_PROFILES: dict[ContentModule, ModuleProfile] = {
    ContentModule.FORUM: ModuleProfile(
        kind=ResultKind.POST,
        category_key="categoryName",
        resolve_status=_forum_status,
    ),
    ContentModule.BLOG: ModuleProfile(
        kind=ResultKind.POST,
        category_key="category",
        resolve_status=_publishable_status,
    ),
    ContentModule.WIKI: ModuleProfile(
        kind=ResultKind.GUIDE,
        category_key="category",
        resolve_status=_publishable_status,
        supports_difficulty=True,
    ),
}


def generate_excerpt(content: str | None, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Return a plain-text excerpt of content, at most max_length chars plus '...'.

    Prefers breaking at the last space before the limit when that space lies
    beyond 80% of the budget; otherwise truncates hard.
    """
    text = strip_html(content)
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length * EXCERPT_BREAK_RATIO:
        return truncated[:last_space] + ELLIPSIS
    return truncated + ELLIPSIS


def resolve_status(module: ContentModule, requested: tuple[str, ...]) -> str:
    """Map the request's status filter onto the module's own status vocabulary."""
    return MODULE_PROFILES[module].resolve_status(requested)


def _first(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return default


def _author(raw: Mapping[str, Any]) -> AuthorRef:
    author = raw.get("author")
    if isinstance(author, AuthorRef):
        return author
    author = author or {}
    return AuthorRef(
        id=str(_first(author, "id", "_id", default="")),
        name=str(author.get("name") or ""),
        avatar=author.get("avatar"),
    )


def _stats(raw: Mapping[str, Any]) -> ContentStats:
    stats = raw.get("stats")
    if isinstance(stats, ContentStats):
        return stats
    stats = stats or {}
    replies = _first(stats, "repliesCount", "replies_count")
    return ContentStats(
        views_count=int(_first(stats, "viewsCount", "views_count", default=0)),
        likes_count=int(_first(stats, "likesCount", "likes_count", default=0)),
        replies_count=int(replies) if replies is not None else None,
    )


def normalize(
    raw: Mapping[str, Any],
    module: ContentModule,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> SearchResultItem:
    """Map one module-native item onto the unified SearchResultItem shape.

    Accepts both the content stores' camelCase keys and the snake_case field
    names of SearchResultItem itself, so re-normalizing a serialized result
    yields the same result. score and highlights are not carried over.

    Raises:
        ValidationException: If the item has no id or no creation timestamp,
            or if a timestamp or counter cannot be parsed.
    """
    profile = MODULE_PROFILES[module]
    item_id = _first(raw, "id", "_id")
    if item_id is None:
        raise ValidationException(f"{module.value} item without id", field="id")
    try:
        created_at = parse_timestamp(_first(raw, "createdAt", "created_at"))
        updated_at = parse_timestamp(_first(raw, "updatedAt", "updated_at"))
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise ValidationException(
            f"{module.value} item {item_id} has a bad timestamp: {e}", field="createdAt"
        ) from e
    try:
        stats = _stats(raw)
    except (TypeError, ValueError) as e:
        raise ValidationException(
            f"{module.value} item {item_id} has bad stats: {e}", field="stats"
        ) from e
    if created_at is None:
        raise ValidationException(
            f"{module.value} item {item_id} without createdAt", field="createdAt"
        )
    content = raw.get("content")
    excerpt = raw.get("excerpt") or generate_excerpt(content, excerpt_length)
    return SearchResultItem(
        id=str(item_id),
        module=module,
        kind=profile.kind,
        title=str(raw.get("title") or ""),
        excerpt=excerpt,
        content=content,
        author=_author(raw),
        category=str(_first(raw, profile.category_key, "category", default="")),
        tags=tuple(raw.get("tags") or ()),
        stats=stats,
        created_at=created_at,
        updated_at=updated_at or created_at,
        slug=str(raw.get("slug") or ""),
        difficulty=raw.get("difficulty") if profile.supports_difficulty else None,
    )
