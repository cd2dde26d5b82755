"""Quote engine: registry, fetch cycles, cache and view models."""

import asyncio
import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional

from stockwatch.core.timezone import format_update_time, now_market
from stockwatch.domain.models import RegistryState
from stockwatch.domain.views import DisplayNode
from stockwatch.providers.market_data_provider import QuoteProvider
from stockwatch.repositories.protocols import WatchlistStore
from stockwatch.services.holdings_updater import HoldingsUpdater
from stockwatch.services.instrument_registry import (
    DEFAULT_INSTRUMENT_CODE,
    InstrumentRegistry,
)
from stockwatch.services.quote_cache import QuoteCache
from stockwatch.services.quote_fetcher import QuoteFetcher
from stockwatch.services.refresh_scheduler import DEFAULT_INTERVAL_MS, RefreshScheduler
from stockwatch.services.view_model_builder import ViewModelBuilder

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]


class RefreshTrigger(str, Enum):
    """What asked for a refresh cycle."""

    TIMER = "TIMER"
    MANUAL = "MANUAL"
    CONFIG = "CONFIG"
    HOLDINGS = "HOLDINGS"


class QuoteEngine:
    """
    Keeps the quote cache fresh and serves display nodes.

    At most one cycle runs at a time. Timer ticks that arrive during a
    cycle are dropped; any other trigger during a cycle is coalesced into a
    single follow-up cycle, and its caller resolves after that follow-up.
    """

    def __init__(
        self,
        store: WatchlistStore,
        provider: QuoteProvider,
        watchlist_key: str = "stockCodeList",
        default_code: str = DEFAULT_INSTRUMENT_CODE,
        default_label: str = "上证指数",
        interval_ms: int = DEFAULT_INTERVAL_MS,
        clock: Callable[[], datetime] = now_market,
    ):
        self._store = store
        self._key = watchlist_key
        self._registry = InstrumentRegistry(default_code)
        self._fetcher = QuoteFetcher(provider)
        self._builder = ViewModelBuilder(default_code, default_label)
        self._holdings = HoldingsUpdater(store, watchlist_key)
        self._scheduler = RefreshScheduler(self._on_timer_tick, interval_ms)
        self._clock = clock

        self._state = RegistryState()
        self._cache = QuoteCache()
        self._loading = True
        self._last_update_time: Optional[str] = None
        self._version = 0
        self._listeners: list[ChangeCallback] = []

        self._inflight: Optional[asyncio.Task] = None
        self._refresh_tasks: set[asyncio.Task] = set()
        self._rerun_requested = False
        self._muted_config_events = False
        self._unsubscribe_store = store.add_listener(self._on_config_changed)

        self.reload_registry()

    # State accessors

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def cache(self) -> QuoteCache:
        return self._cache

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def last_update_time(self) -> Optional[str]:
        return self._last_update_time

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_refreshing(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def scheduler(self) -> RefreshScheduler:
        return self._scheduler

    # Change notification

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """Subscribe to change notifications. Returns an unsubscribe callable."""
        self._listeners.append(callback)

        def _remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _remove

    def _notify(self) -> None:
        self._version += 1
        for callback in list(self._listeners):
            callback()

    # Presentation

    def get_root_items(self) -> list[DisplayNode]:
        return self._builder.root_items(
            self._state, self._cache, self._loading, self._last_update_time
        )

    def get_detail_items(self, code: str) -> list[DisplayNode]:
        return self._builder.detail_items(code, self._state, self._cache)

    # Registry

    def reload_registry(self) -> RegistryState:
        """Re-read the watch-list from the store and replace the registry."""
        return self._apply_entries(self._store.get_list(self._key))

    def _apply_entries(self, entries: list[str]) -> RegistryState:
        self._state = self._registry.load(entries)
        self._notify()
        return self._state

    # Refresh cycles

    async def refresh(self, trigger: RefreshTrigger = RefreshTrigger.MANUAL) -> None:
        """Run reload-then-fetch, honoring the single-flight policy."""
        if self.is_refreshing:
            if trigger is RefreshTrigger.TIMER:
                logger.debug("Skipping timer refresh; a cycle is in flight")
                return
            self._rerun_requested = True
            await self.wait_idle()
            return

        self._inflight = asyncio.ensure_future(self._drain())
        await self.wait_idle()

    def request_refresh(self, trigger: RefreshTrigger) -> Optional[asyncio.Task]:
        """
        Schedule a refresh without awaiting it.

        Outside a running event loop only the registry is reloaded; the
        next cycle fetches.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.reload_registry()
            return None
        task = loop.create_task(self.refresh(trigger))
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait until no cycle (including coalesced follow-ups) is in flight."""
        while self.is_refreshing:
            await asyncio.shield(self._inflight)

    async def _drain(self) -> None:
        while True:
            self._rerun_requested = False
            try:
                await self._run_cycle()
            except Exception:
                logger.exception("Refresh cycle failed")
                self._loading = False
                self._notify()
            if not self._rerun_requested:
                return

    async def _run_cycle(self) -> None:
        # store reads may block on the database
        entries = await asyncio.to_thread(self._store.get_list, self._key)
        self._apply_entries(entries)
        codes = list(self._state.instrument_codes)
        if not codes:
            self._loading = False
            self._notify()
            return

        update_time = format_update_time(self._clock())
        result = await asyncio.to_thread(self._fetcher.fetch, codes, update_time)

        self._cache.replace_all(result.quotes)
        if result.ok:
            self._last_update_time = update_time
        self._loading = False
        self._notify()

    # Holdings

    def current_holding(self, code: str) -> Decimal:
        return self._holdings.current(code)

    async def update_holding(self, code: str, shares: int) -> list[str]:
        """Persist a holding change, then reload and refresh before returning."""
        self._muted_config_events = True
        try:
            entries = self._holdings.update(code, shares)
        finally:
            self._muted_config_events = False
        await self.refresh(RefreshTrigger.HOLDINGS)
        return entries

    # Lifecycle

    def start(self, interval_ms: Optional[int] = None) -> None:
        """Start auto refresh, replacing any running timer."""
        self._scheduler.start(interval_ms)

    def stop(self) -> None:
        """Stop auto refresh. The cache keeps its last contents."""
        self._scheduler.stop()

    def close(self) -> None:
        self.stop()
        self._unsubscribe_store()

    def _on_timer_tick(self) -> None:
        self.request_refresh(RefreshTrigger.TIMER)

    def _on_config_changed(self, key: str) -> None:
        if key != self._key or self._muted_config_events:
            return
        logger.info("Watch-list configuration changed; reloading")
        self.request_refresh(RefreshTrigger.CONFIG)
