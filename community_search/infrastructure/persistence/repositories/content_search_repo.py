"""Content search repository. Case-insensitive substring search over one module's table.

Implements IContentSearchRepository for forum posts, blog posts and wiki
guides. Opens one session per call: the search use case queries all modules
concurrently and an AsyncSession must not run concurrent statements.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from community_search.application.dtos.search import ModuleSearchPage, ModuleSearchParams
from community_search.domain.enums import ContentModule, ContentStatus, SortHint
from community_search.infrastructure.persistence.models.content import (
    BlogPost,
    ForumPost,
    WikiGuide,
)
from community_search.infrastructure.persistence.models.mixins import PublishedContentModel

LIKE_ESCAPE = "\\"

MODULE_MODELS: dict[ContentModule, type[PublishedContentModel]] = {
    ContentModule.FORUM: ForumPost,
    ContentModule.BLOG: BlogPost,
    ContentModule.WIKI: WikiGuide,
}


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def contains_pattern(value: str) -> str:
    return f"%{escape_like(value)}%"


class ContentSearchRepository:
    """Search primitive for one content module, backed by its ORM model."""

    def __init__(
        self,
        module: ContentModule,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self.module = module
        self.model = MODULE_MODELS[module]
        self.session_factory = session_factory

    @property
    def _category_column(self) -> Any:
        if self.model is ForumPost:
            return ForumPost.category_name
        return self.model.category

    def _status_conditions(self, status: str) -> list[ColumnElement[bool]]:
        """Visibility filter for the module's status vocabulary.

        'active' means not locked (forum); 'all' means any publication status.
        Soft-deleted rows are never returned.
        """
        model = self.model
        conditions: list[ColumnElement[bool]] = [model.deleted_at.is_(None)]
        if status == "active":
            if model is ForumPost:
                conditions.append(ForumPost.is_locked.is_(False))
        elif status == "all":
            conditions.append(model.status.in_([s.value for s in ContentStatus]))
        else:
            conditions.append(model.status == status)
        return conditions

    def _conditions(self, params: ModuleSearchParams) -> list[ColumnElement[bool]]:
        model = self.model
        pattern = contains_pattern(params.query)
        conditions = self._status_conditions(params.status)
        conditions.append(
            or_(
                model.title.ilike(pattern, escape=LIKE_ESCAPE),
                model.content.ilike(pattern, escape=LIKE_ESCAPE),
                model.excerpt.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
        if params.categories:
            conditions.append(self._category_column.in_(params.categories))
        if params.tags:
            conditions.append(model.tags.overlap(list(params.tags)))
        if params.authors:
            conditions.append(model.author_name.in_(params.authors))
        if params.difficulty and model is WikiGuide:
            conditions.append(WikiGuide.difficulty == params.difficulty)
        if params.date_range is not None:
            if params.date_range.start is not None:
                conditions.append(model.created_at >= params.date_range.start)
            if params.date_range.end is not None:
                conditions.append(model.created_at <= params.date_range.end)
        return conditions

    def _ordered(self, stmt: Select[Any], hint: SortHint) -> Select[Any]:
        model = self.model
        if hint == SortHint.POPULAR:
            order = [model.likes_count.desc()]
            if model is ForumPost:
                order.append(ForumPost.replies_count.desc())
        elif hint == SortHint.VIEWS:
            order = [model.views_count.desc()]
        else:
            order = [model.created_at.desc()]
        return stmt.order_by(*order, model.id)

    def _to_raw(self, row: PublishedContentModel) -> dict[str, Any]:
        """Module-native item shape (camelCase keys) consumed by the normalizer."""
        stats: dict[str, Any] = {
            "viewsCount": row.views_count,
            "likesCount": row.likes_count,
        }
        raw: dict[str, Any] = {
            "id": row.id,
            "slug": row.slug,
            "title": row.title,
            "excerpt": row.excerpt,
            "content": row.content,
            "author": {
                "id": row.author_id,
                "name": row.author_name,
                "avatar": row.author_avatar,
            },
            "tags": list(row.tags or []),
            "stats": stats,
            "status": row.status,
            "createdAt": row.created_at,
            "updatedAt": row.updated_at,
        }
        if isinstance(row, ForumPost):
            raw["categoryName"] = row.category_name
            stats["repliesCount"] = row.replies_count
        else:
            raw["category"] = row.category
        if isinstance(row, WikiGuide):
            raw["difficulty"] = row.difficulty
        return raw

    async def search_module(self, params: ModuleSearchParams) -> ModuleSearchPage:
        """Return one page of matching items (native shape) and the total match count."""
        conditions = self._conditions(params)
        stmt = self._ordered(select(self.model).where(*conditions), params.sort_hint)
        stmt = stmt.offset(params.offset).limit(params.limit)
        count_stmt = select(func.count()).select_from(self.model).where(*conditions)
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).scalars().all()
            total = (await session.execute(count_stmt)).scalar_one()
        return ModuleSearchPage(items=[self._to_raw(row) for row in rows], total=total)

    async def title_completions(self, query: str, limit: int = 10) -> list[str]:
        """Titles of the most viewed visible items whose title contains query."""
        model = self.model
        status = "active" if model is ForumPost else ContentStatus.PUBLISHED.value
        stmt = (
            select(model.title)
            .where(
                *self._status_conditions(status),
                model.title.ilike(contains_pattern(query), escape=LIKE_ESCAPE),
            )
            .order_by(model.views_count.desc(), model.id)
            .limit(limit)
        )
        async with self.session_factory() as session:
            return list((await session.execute(stmt)).scalars().all())


def build_content_repositories(
    session_factory: async_sessionmaker[AsyncSession],
) -> dict[ContentModule, ContentSearchRepository]:
    """One repository per content module, all sharing the session factory."""
    return {
        module: ContentSearchRepository(module, session_factory)
        for module in ContentModule
    }
