"""Service layer - quote pipeline orchestration."""

from stockwatch.services.instrument_registry import InstrumentRegistry, parse_entry
from stockwatch.services.quote_cache import QuoteCache
from stockwatch.services.quote_fetcher import FetchResult, QuoteFetcher, decode_batch
from stockwatch.services.view_model_builder import ViewModelBuilder
from stockwatch.services.holdings_updater import (
    HoldingsUpdater,
    parse_shares_input,
    rewrite_entries,
)
from stockwatch.services.refresh_scheduler import RefreshScheduler
from stockwatch.services.engine import QuoteEngine, RefreshTrigger

__all__ = [
    "InstrumentRegistry",
    "parse_entry",
    "QuoteCache",
    "FetchResult",
    "QuoteFetcher",
    "decode_batch",
    "ViewModelBuilder",
    "HoldingsUpdater",
    "parse_shares_input",
    "rewrite_entries",
    "RefreshScheduler",
    "QuoteEngine",
    "RefreshTrigger",
]
