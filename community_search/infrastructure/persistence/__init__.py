"""Persistence: database engine, ORM models, repositories, migrations."""

from community_search.infrastructure.persistence.database import (
    Base,
    dispose_engine,
    get_db,
    get_session_factory,
)

__all__ = [
    "Base",
    "dispose_engine",
    "get_db",
    "get_session_factory",
]
