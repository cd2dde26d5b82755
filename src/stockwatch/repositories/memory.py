"""In-memory settings store."""

from typing import Callable, Optional

from stockwatch.repositories.listeners import ListenerRegistry
from stockwatch.repositories.protocols import ChangeListener


class InMemoryWatchlistStore:
    """Dict-backed store for tests and the memory settings backend."""

    def __init__(self, initial: Optional[dict[str, list[str]]] = None):
        self._values: dict[str, list[str]] = {
            key: list(values) for key, values in (initial or {}).items()
        }
        self._listeners = ListenerRegistry()

    def get_list(self, key: str) -> list[str]:
        return list(self._values.get(key, []))

    def set_list(self, key: str, values: list[str]) -> None:
        self._values[key] = list(values)
        self._listeners.notify(key)

    def add_listener(self, listener: ChangeListener) -> Callable[[], None]:
        return self._listeners.add(listener)
