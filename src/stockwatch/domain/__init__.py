"""Domain layer - pure models with no external dependencies."""

from stockwatch.domain.models import (
    InstrumentCode,
    MarketProfile,
    MarketTag,
    NodeKind,
    ParseOutcome,
    ParsedEntry,
    Quote,
    RegistryState,
)

__all__ = [
    "InstrumentCode",
    "MarketProfile",
    "MarketTag",
    "NodeKind",
    "ParseOutcome",
    "ParsedEntry",
    "Quote",
    "RegistryState",
]
