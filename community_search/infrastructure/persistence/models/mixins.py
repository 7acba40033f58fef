"""SQLAlchemy mixins shared by the content models.

Provides: CuidMixin, TimestampMixin, SoftDeleteMixin, AuthorMixin,
EngagementMixin and the combined PublishedContentModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from community_search.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SoftDeleteMixin:
    """Mixin for soft delete (deleted_at). Null means not deleted."""

    @declared_attr
    def deleted_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True, index=True)


class AuthorMixin:
    """Denormalized author reference (avoids a join per search hit)."""

    @declared_attr
    def author_id(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False, index=True)

    @declared_attr
    def author_name(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False, index=True)

    @declared_attr
    def author_avatar(cls) -> Mapped[str | None]:
        return mapped_column(String, nullable=True)


class EngagementMixin:
    """View and like counters."""

    @declared_attr
    def views_count(cls) -> Mapped[int]:
        return mapped_column(Integer, nullable=False, server_default="0")

    @declared_attr
    def likes_count(cls) -> Mapped[int]:
        return mapped_column(Integer, nullable=False, server_default="0")


class PublishedContentModel(
    CuidMixin, TimestampMixin, SoftDeleteMixin, AuthorMixin, EngagementMixin
):
    """Columns common to forum posts, blog posts and wiki guides."""

    __abstract__ = True

    @declared_attr
    def slug(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False, unique=True)

    @declared_attr
    def title(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False)

    @declared_attr
    def excerpt(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)

    @declared_attr
    def content(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)

    @declared_attr
    def tags(cls) -> Mapped[list[str]]:
        return mapped_column(ARRAY(String), nullable=False, server_default="{}")

    @declared_attr
    def status(cls) -> Mapped[str]:
        return mapped_column(String, nullable=False, server_default="published", index=True)
