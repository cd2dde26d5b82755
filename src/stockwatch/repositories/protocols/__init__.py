"""Repository protocol definitions (interfaces)."""

from stockwatch.repositories.protocols.watchlist_store import (
    ChangeListener,
    WatchlistStore,
)

__all__ = [
    "ChangeListener",
    "WatchlistStore",
]
