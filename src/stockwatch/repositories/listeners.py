"""Change-listener bookkeeping shared by store implementations."""

from typing import Callable

from stockwatch.repositories.protocols import ChangeListener


class ListenerRegistry:
    """Ordered list of change listeners."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def add(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def notify(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)
