"""Builders for search test data (raw module items and normalized results)."""

from datetime import UTC, datetime, timedelta
from typing import Any

from community_search.application.dtos.search import (
    AuthorRef,
    ContentStats,
    SearchResultItem,
)
from community_search.domain.enums import ContentModule, ResultKind

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)


def make_item(
    item_id: str = "i1",
    *,
    module: ContentModule = ContentModule.FORUM,
    title: str = "Untitled",
    excerpt: str = "",
    content: str | None = None,
    author: str = "steve",
    category: str = "general",
    tags: tuple[str, ...] = (),
    views: int = 0,
    likes: int = 0,
    replies: int | None = None,
    age_days: float = 365,
    score: int | None = None,
) -> SearchResultItem:
    created = NOW - timedelta(days=age_days)
    return SearchResultItem(
        id=item_id,
        module=module,
        kind=ResultKind.GUIDE if module is ContentModule.WIKI else ResultKind.POST,
        title=title,
        excerpt=excerpt,
        content=content,
        author=AuthorRef(id=f"u-{author}", name=author),
        category=category,
        tags=tags,
        stats=ContentStats(views_count=views, likes_count=likes, replies_count=replies),
        created_at=created,
        updated_at=created,
        slug=f"{module.value}-{item_id}",
        score=score,
    )


def raw_item(
    item_id: str = "r1",
    *,
    title: str = "Untitled",
    content: str | None = "",
    excerpt: str | None = None,
    author: str = "steve",
    category: str = "general",
    category_key: str = "category",
    tags: list[str] | None = None,
    views: int = 0,
    likes: int = 0,
    replies: int | None = None,
    created_at: Any = "2025-12-01T10:00:00Z",
    **extra: Any,
) -> dict[str, Any]:
    """Module-native item as the content repositories return it (camelCase keys)."""
    stats: dict[str, Any] = {"viewsCount": views, "likesCount": likes}
    if replies is not None:
        stats["repliesCount"] = replies
    raw: dict[str, Any] = {
        "id": item_id,
        "slug": f"slug-{item_id}",
        "title": title,
        "content": content,
        "excerpt": excerpt,
        "author": {"id": f"u-{author}", "name": author},
        category_key: category,
        "tags": tags,
        "stats": stats,
        "createdAt": created_at,
        **extra,
    }
    return raw
