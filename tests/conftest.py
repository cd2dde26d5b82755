"""
Pytest configuration and fixtures for the quote engine tests.

This module provides:
- Deterministic quote providers (fixed records, failing, switchable)
- In-memory watch-list store
- Engine and view-model fixtures with a fixed clock
- FastAPI test client wired to an isolated application context
"""

import asyncio
from datetime import datetime
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from stockwatch.app_context import AppContext, set_app_context
from stockwatch.config.settings import Settings, reset_settings
from stockwatch.core.exceptions import QuoteFetchError
from stockwatch.core.timezone import MARKET_TZ
from stockwatch.repositories import InMemoryWatchlistStore
from stockwatch.services import QuoteEngine

WATCHLIST_KEY = "stockCodeList"


# =============================================================================
# TIME HELPERS
# =============================================================================


def market_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in the market timezone."""
    return MARKET_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return market_datetime(2024, 6, 14, 14, 30, 5)


# =============================================================================
# QUOTE PROVIDERS
# =============================================================================


def raw_record(code: str, name: Optional[str], f2, f4, f3, f18) -> dict[str, Any]:
    """Build one provider record with scaled integer fields."""
    market, symbol = code.split(".", 1)
    return {"f12": symbol, "f13": int(market), "f14": name, "f2": f2, "f4": f4, "f3": f3, "f18": f18}


FIXED_RECORDS = {
    # 3052.18, +15.32, +0.50%, prev 3036.86
    "1.000001": raw_record("1.000001", "上证指数", 305218, 1532, 50, 303686),
    # 372.400, +4.200, +1.14%, prev 368.200
    "116.00700": raw_record("116.00700", "腾讯控股", 372400, 4200, 114, 368200),
    # 185.500, -1.250, -0.67%, prev 186.750
    "105.AAPL": raw_record("105.AAPL", "苹果", 185500, -1250, -67, 186750),
    # 188.20, -3.56, -1.86%, prev 191.76
    "0.300750": raw_record("0.300750", "宁德时代", 18820, -356, -186, 19176),
    # 87.12, 0.00, 0.00%, prev 87.12
    "1.688981": raw_record("1.688981", "中芯国际", 8712, 0, 0, 8712),
}


class DeterministicQuoteProvider:
    """
    Deterministic quote provider for testing.

    Returns FIXED_RECORDS (or the given records) for requested codes and
    records every batch it was asked for.
    """

    def __init__(self, records: Optional[dict[str, dict[str, Any]]] = None):
        self.records = dict(FIXED_RECORDS if records is None else records)
        self.calls: list[list[str]] = []

    def fetch_batch(self, codes: list[str]) -> Any:
        self.calls.append(list(codes))
        diff = [self.records[c] for c in codes if c in self.records]
        return {"rc": 0, "data": {"total": len(diff), "diff": diff}}


class FailingQuoteProvider:
    """Quote provider whose transport always fails."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def fetch_batch(self, codes: list[str]) -> Any:
        self.calls.append(list(codes))
        raise QuoteFetchError("Network unavailable")


class SwitchableQuoteProvider(DeterministicQuoteProvider):
    """Deterministic provider that can be flipped into failure mode."""

    def __init__(self, records: Optional[dict[str, dict[str, Any]]] = None):
        super().__init__(records)
        self.failing = False

    def fetch_batch(self, codes: list[str]) -> Any:
        if self.failing:
            self.calls.append(list(codes))
            raise QuoteFetchError("Network unavailable")
        return super().fetch_batch(codes)


@pytest.fixture
def deterministic_provider() -> DeterministicQuoteProvider:
    """Provide deterministic quote provider."""
    return DeterministicQuoteProvider()


@pytest.fixture
def failing_provider() -> FailingQuoteProvider:
    """Provide a quote provider that always fails."""
    return FailingQuoteProvider()


# =============================================================================
# STORE / ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def store() -> InMemoryWatchlistStore:
    """Provide an empty in-memory watch-list store."""
    return InMemoryWatchlistStore()


@pytest.fixture
def engine_factory(store, deterministic_provider, fixed_now) -> Callable[..., QuoteEngine]:
    """Factory for engines over the shared store with a fixed clock."""
    created: list[QuoteEngine] = []

    def _create_engine(entries: Optional[list[str]] = None, provider=None) -> QuoteEngine:
        if entries is not None:
            store.set_list(WATCHLIST_KEY, entries)
        engine = QuoteEngine(
            store=store,
            provider=provider or deterministic_provider,
            watchlist_key=WATCHLIST_KEY,
            clock=lambda: fixed_now,
        )
        created.append(engine)
        return engine

    yield _create_engine

    for engine in created:
        engine.close()


def run(coro):
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_context(store, deterministic_provider) -> AppContext:
    """Isolated application context with in-memory store and fixed provider."""
    reset_settings()
    settings = Settings(
        settings_backend="memory",
        quote_provider="stub",
        refresh_interval_ms=60_000,
        initial_watchlist=[],
        _env_file=None,
    )
    context = AppContext(settings=settings, store=store, provider=deterministic_provider)
    set_app_context(context)
    yield context
    context.close()
    set_app_context(None)
    reset_settings()


@pytest.fixture
def client(api_context) -> TestClient:
    """Provide FastAPI test client bound to the isolated context."""
    from stockwatch.main import app

    with TestClient(app) as c:
        yield c
