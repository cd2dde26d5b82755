"""SQLAlchemy settings store implementation."""

from stockwatch.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    init_db_with_url,
    reset_database,
    Base,
)
from stockwatch.repositories.sqlalchemy.watchlist_store import SqlAlchemyWatchlistStore

__all__ = [
    "get_engine",
    "get_session_factory",
    "init_db_with_url",
    "reset_database",
    "Base",
    "SqlAlchemyWatchlistStore",
]
