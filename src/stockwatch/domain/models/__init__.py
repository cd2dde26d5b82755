"""Domain models package."""

from stockwatch.domain.models.enums import MarketTag, NodeKind, ParseOutcome
from stockwatch.domain.models.instrument import (
    InstrumentCode,
    MarketProfile,
    profile_for_market,
    classify_market_tag,
)
from stockwatch.domain.models.quote import Quote
from stockwatch.domain.models.registry import ParsedEntry, RegistryState

__all__ = [
    "MarketTag",
    "NodeKind",
    "ParseOutcome",
    "InstrumentCode",
    "MarketProfile",
    "profile_for_market",
    "classify_market_tag",
    "Quote",
    "ParsedEntry",
    "RegistryState",
]
