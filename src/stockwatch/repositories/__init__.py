"""Repository layer - settings store abstractions and implementations."""

from stockwatch.repositories.protocols import WatchlistStore
from stockwatch.repositories.memory import InMemoryWatchlistStore

__all__ = [
    "WatchlistStore",
    "InMemoryWatchlistStore",
]
