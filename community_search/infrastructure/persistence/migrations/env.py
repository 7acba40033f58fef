"""Alembic environment configuration.

Reads the DB URL from DATABASE_URL (via core.config.Settings) and supports
both offline and online migrations. Only tables owned by this service are
managed; the forum, blog and wiki tables belong to the content platform.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from community_search.core.config import Settings
from community_search.infrastructure.persistence import models  # noqa: F401
from community_search.infrastructure.persistence.database import Base

OWNED_TABLES = frozenset({"search_analytics_event"})

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Allow overriding DB URL via `-x db_url=...`
x_args: dict[str, Any] = context.get_x_argument(as_dictionary=True)
db_url: str = x_args.get("db_url") or Settings().database_url
config.set_main_option("sqlalchemy.url", db_url)

target_metadata = Base.metadata


def include_object(obj: Any, name: str | None, type_: str, reflected: bool, compare_to: Any) -> bool:
    if type_ == "table":
        return name in OWNED_TABLES
    table = getattr(obj, "table", None)
    return table is None or table.name in OWNED_TABLES


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        include_object=include_object,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode with async engine."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async def do_run_migrations() -> None:
        async with connectable.connect() as connection:
            await connection.run_sync(_run_sync_migrations)
        await connectable.dispose()

    def _run_sync_migrations(connection: Connection) -> None:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_object=include_object,
        )
        with context.begin_transaction():
            context.run_migrations()

    asyncio.run(do_run_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
