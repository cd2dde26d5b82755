"""
Integration tests for the SQLAlchemy settings store with SQLite.

Tests cover:
- Ordered list persistence and wholesale replacement
- Key isolation
- Change notification
- Persistence across store instances
- Application context seeding
"""

import pytest

from stockwatch.app_context import AppContext
from stockwatch.config.settings import Settings
from stockwatch.repositories.sqlalchemy import (
    SqlAlchemyWatchlistStore,
    get_session_factory,
    init_db_with_url,
    reset_database,
)

KEY = "stockCodeList"


@pytest.fixture
def database_url(tmp_path) -> str:
    """File-backed SQLite URL in a temporary directory."""
    url = f"sqlite:///{tmp_path / 'settings.db'}"
    yield url
    reset_database()


@pytest.fixture
def sqlite_store(database_url) -> SqlAlchemyWatchlistStore:
    init_db_with_url(database_url)
    return SqlAlchemyWatchlistStore(get_session_factory())


# =============================================================================
# STORE OPERATIONS
# =============================================================================


class TestSqlAlchemyWatchlistStore:
    """Tests for SqlAlchemyWatchlistStore."""

    def test_unknown_key_is_empty(self, sqlite_store):
        assert sqlite_store.get_list(KEY) == []

    def test_set_list_keeps_order(self, sqlite_store):
        """
        GIVEN an empty SQLite settings store
        WHEN I store a watch-list
        THEN it is read back in the same order
        """
        entries = ["116.00700:100", "1.000001", "105.AAPL:10"]

        sqlite_store.set_list(KEY, entries)

        assert sqlite_store.get_list(KEY) == entries

    def test_set_list_replaces_previous_entries(self, sqlite_store):
        sqlite_store.set_list(KEY, ["a", "b", "c"])

        sqlite_store.set_list(KEY, ["c"])

        assert sqlite_store.get_list(KEY) == ["c"]

    def test_duplicate_values_are_kept(self, sqlite_store):
        sqlite_store.set_list(KEY, ["1.000001", "1.000001"])

        assert sqlite_store.get_list(KEY) == ["1.000001", "1.000001"]

    def test_keys_are_isolated(self, sqlite_store):
        sqlite_store.set_list(KEY, ["1.000001"])
        sqlite_store.set_list("other", ["x"])

        assert sqlite_store.get_list(KEY) == ["1.000001"]
        assert sqlite_store.get_list("other") == ["x"]

    def test_listeners_notified_with_key(self, sqlite_store):
        seen = []
        unsubscribe = sqlite_store.add_listener(seen.append)

        sqlite_store.set_list(KEY, ["1.000001"])
        unsubscribe()
        sqlite_store.set_list(KEY, ["0.300750"])

        assert seen == [KEY]

    def test_data_survives_new_store_instance(self, database_url):
        init_db_with_url(database_url)
        SqlAlchemyWatchlistStore(get_session_factory()).set_list(KEY, ["1.688981:50"])

        init_db_with_url(database_url)
        reopened = SqlAlchemyWatchlistStore(get_session_factory())

        assert reopened.get_list(KEY) == ["1.688981:50"]


# =============================================================================
# CONTEXT WIRING
# =============================================================================


class TestAppContextStore:
    """Tests for store creation from settings."""

    def test_sqlite_backend_is_seeded_once(self, tmp_path):
        settings = Settings(
            settings_backend="sqlite",
            data_dir=str(tmp_path),
            quote_provider="stub",
            initial_watchlist=["1.000001", "116.00700:100"],
            _env_file=None,
        )
        context = AppContext(settings=settings)
        try:
            store = context.store
            assert store.get_list(KEY) == ["1.000001", "116.00700:100"]
            store.set_list(KEY, ["105.AAPL"])
        finally:
            context.close()
            reset_database()

        reopened = AppContext(settings=settings)
        try:
            assert reopened.store.get_list(KEY) == ["105.AAPL"]
        finally:
            reopened.close()
            reset_database()

    def test_memory_backend(self):
        settings = Settings(settings_backend="memory", initial_watchlist=[], _env_file=None)
        context = AppContext(settings=settings)

        assert context.store.get_list(KEY) == []
        context.close()
