"""Content ORM models searched by the content adapters: forum posts, blog posts, wiki guides."""

from sqlalchemy import Boolean, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from community_search.infrastructure.persistence.database import Base
from community_search.infrastructure.persistence.models.mixins import PublishedContentModel


class ForumPost(PublishedContentModel, Base):
    """Forum thread starter. Category is stored by display name."""

    __tablename__ = "forum_post"

    category_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    replies_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    is_locked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    is_pinned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )


class BlogPost(PublishedContentModel, Base):
    """Blog article."""

    __tablename__ = "blog_post"

    category: Mapped[str] = mapped_column(String, nullable=False, index=True)


class WikiGuide(PublishedContentModel, Base):
    """Wiki guide with a difficulty level (beginner | intermediate | advanced)."""

    __tablename__ = "wiki_guide"

    category: Mapped[str] = mapped_column(String, nullable=False, index=True)
    difficulty: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
