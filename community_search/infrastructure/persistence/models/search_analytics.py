"""Search analytics ORM model. One row per reported search or result click."""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from community_search.infrastructure.persistence.database import Base
from community_search.shared.utils.generators import generate_cuid


class SearchAnalyticsEvent(Base):
    """Search or click event (event_type 'search' | 'search_click'). Append-only."""

    __tablename__ = "search_analytics_event"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    event_type: Mapped[str] = mapped_column(String, nullable=False, index=True)
    query: Mapped[str] = mapped_column(Text, nullable=False)
    session_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    user_id: Mapped[str | None] = mapped_column(String, nullable=True)
    # search events
    result_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    search_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    filters: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    # click events
    result_id: Mapped[str | None] = mapped_column(String, nullable=True)
    position: Mapped[int | None] = mapped_column(Integer, nullable=True)
    result_type: Mapped[str | None] = mapped_column(String, nullable=True)
    result_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    # client
    ip_address: Mapped[str | None] = mapped_column(String, nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    referer: Mapped[str | None] = mapped_column(Text, nullable=True)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False
    )
