"""add_search_analytics_event_table

Revision ID: a3f1c9d2e7b4
Revises:
Create Date: 2026-10-18

Search and result-click events reported by clients, summarized per time range.
Append-only.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a3f1c9d2e7b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create search_analytics_event table and indexes."""
    op.create_table(
        "search_analytics_event",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("session_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("result_count", sa.Integer(), nullable=True),
        sa.Column("search_time_ms", sa.Integer(), nullable=True),
        sa.Column("filters", sa.dialects.postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("result_id", sa.String(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.Column("result_type", sa.String(), nullable=True),
        sa.Column("result_title", sa.Text(), nullable=True),
        sa.Column("ip_address", sa.String(), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("referer", sa.Text(), nullable=True),
        sa.Column("occurred_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_search_analytics_event_event_type", "search_analytics_event", ["event_type"]
    )
    op.create_index(
        "ix_search_analytics_event_session_id", "search_analytics_event", ["session_id"]
    )
    op.create_index(
        "ix_search_analytics_event_occurred_at", "search_analytics_event", ["occurred_at"]
    )


def downgrade() -> None:
    """Drop search_analytics_event table and indexes."""
    op.drop_index("ix_search_analytics_event_occurred_at", table_name="search_analytics_event")
    op.drop_index("ix_search_analytics_event_session_id", table_name="search_analytics_event")
    op.drop_index("ix_search_analytics_event_event_type", table_name="search_analytics_event")
    op.drop_table("search_analytics_event")
