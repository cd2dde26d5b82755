"""SQLAlchemy implementation of WatchlistStore."""

import logging
from typing import Callable

from sqlalchemy.orm import Session, sessionmaker

from stockwatch.repositories.listeners import ListenerRegistry
from stockwatch.repositories.protocols import ChangeListener
from stockwatch.repositories.sqlalchemy.orm_models import SettingEntryORM

logger = logging.getLogger(__name__)


class SqlAlchemyWatchlistStore:
    """SQLAlchemy-backed string-list settings store."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._listeners = ListenerRegistry()

    def get_list(self, key: str) -> list[str]:
        """Get the entries stored under key, in position order."""
        with self._session_factory() as db:
            rows = (
                db.query(SettingEntryORM)
                .filter(SettingEntryORM.key == key)
                .order_by(SettingEntryORM.position)
                .all()
            )
            return [row.value for row in rows]

    def set_list(self, key: str, values: list[str]) -> None:
        """Replace all entries under key, then notify listeners."""
        with self._session_factory() as db:
            self._replace(db, key, values)
            db.commit()
        logger.debug("Stored %d entries under %s", len(values), key)
        self._listeners.notify(key)

    def add_listener(self, listener: ChangeListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    @staticmethod
    def _replace(db: Session, key: str, values: list[str]) -> None:
        db.query(SettingEntryORM).filter(SettingEntryORM.key == key).delete()
        for position, value in enumerate(values):
            db.add(SettingEntryORM(key=key, position=position, value=value))
