"""Settings store protocol for string-list configuration values."""

from typing import Callable, Protocol

ChangeListener = Callable[[str], None]


class WatchlistStore(Protocol):
    """Interface for the process-wide string-list settings store."""

    def get_list(self, key: str) -> list[str]:
        """Return the stored list for key (empty when unset)."""
        ...

    def set_list(self, key: str, values: list[str]) -> None:
        """Replace the list for key, then notify listeners with the key."""
        ...

    def add_listener(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        ...
