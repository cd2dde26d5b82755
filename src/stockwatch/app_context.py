"""Application context for in-process service management.

Wires the settings store, quote provider and engine from Settings so the
API layer (and any other host) shares one engine instance.
"""

import logging
from typing import Optional

from stockwatch.config.settings import Settings, get_settings
from stockwatch.providers import EastmoneyQuoteProvider, StubQuoteProvider
from stockwatch.providers.market_data_provider import QuoteProvider
from stockwatch.repositories import InMemoryWatchlistStore, WatchlistStore
from stockwatch.repositories.sqlalchemy import (
    SqlAlchemyWatchlistStore,
    get_session_factory,
    init_db_with_url,
)
from stockwatch.services import QuoteEngine

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to the store and engine.

    Components are created lazily from settings; tests inject their own.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[WatchlistStore] = None,
        provider: Optional[QuoteProvider] = None,
    ):
        self._settings = settings
        self._store = store
        self._provider = provider
        self._engine: Optional[QuoteEngine] = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> WatchlistStore:
        """Get the watch-list settings store, seeding it on first use."""
        if self._store is None:
            self._store = self._create_store()
            key = self.settings.watchlist_key
            if self.settings.initial_watchlist and not self._store.get_list(key):
                self._store.set_list(key, list(self.settings.initial_watchlist))
        return self._store

    @property
    def provider(self) -> QuoteProvider:
        if self._provider is None:
            self._provider = self._create_provider()
        return self._provider

    @property
    def engine(self) -> QuoteEngine:
        """Get the QuoteEngine instance."""
        if self._engine is None:
            settings = self.settings
            self._engine = QuoteEngine(
                store=self.store,
                provider=self.provider,
                watchlist_key=settings.watchlist_key,
                default_code=settings.default_instrument_code,
                default_label=settings.default_instrument_label,
                interval_ms=settings.refresh_interval_ms,
            )
        return self._engine

    def _create_store(self) -> WatchlistStore:
        if self.settings.settings_backend == "memory":
            return InMemoryWatchlistStore()
        init_db_with_url(self.settings.get_database_url())
        return SqlAlchemyWatchlistStore(get_session_factory())

    def _create_provider(self) -> QuoteProvider:
        if self.settings.quote_provider == "stub":
            logger.info("Using stub quote provider")
            return StubQuoteProvider()
        return EastmoneyQuoteProvider(
            url=self.settings.quote_api_url,
            fields=self.settings.quote_fields,
            timeout=self.settings.quote_request_timeout_seconds,
        )

    def close(self) -> None:
        """Stop the engine and release the provider."""
        if self._engine is not None:
            self._engine.close()
        close = getattr(self._provider, "close", None)
        if close is not None:
            close()


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
