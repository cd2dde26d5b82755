"""Instrument codes and per-market decoding rules."""

from dataclasses import dataclass
from typing import Optional

from stockwatch.domain.models.enums import MarketTag

HK_MARKETS = frozenset({116})
US_MARKETS = frozenset({105, 106, 107})

# Markets the provider quotes in thousandths
_MILLI_MARKETS = HK_MARKETS | US_MARKETS


@dataclass(frozen=True)
class MarketProfile:
    """Divisor and decimal places for a market's scaled integer fields."""

    divisor: int
    places: int


DOMESTIC_PROFILE = MarketProfile(divisor=100, places=2)
MILLI_PROFILE = MarketProfile(divisor=1000, places=3)


def profile_for_market(market_id: int) -> MarketProfile:
    """Select the decoding profile for a provider market id."""
    if market_id in _MILLI_MARKETS:
        return MILLI_PROFILE
    return DOMESTIC_PROFILE


@dataclass(frozen=True)
class InstrumentCode:
    """A "<market>.<symbol>" identifier split into its parts."""

    market: str
    symbol: str

    @classmethod
    def parse(cls, code: str) -> Optional["InstrumentCode"]:
        """Split a code on its first dot. Returns None for an empty code."""
        code = (code or "").strip()
        if not code:
            return None
        market, _, symbol = code.partition(".")
        return cls(market=market, symbol=symbol)

    @classmethod
    def from_parts(cls, market_id, symbol) -> "InstrumentCode":
        return cls(market=str(market_id), symbol=str(symbol))

    @property
    def market_id(self) -> Optional[int]:
        try:
            return int(self.market)
        except ValueError:
            return None

    def __str__(self) -> str:
        if not self.symbol:
            return self.market
        return f"{self.market}.{self.symbol}"


def classify_market_tag(code: str) -> MarketTag:
    """
    Classify an instrument code into its display market tag.

    HK (116) and US (105/106/107) are keyed by market id. Domestic boards are
    recognized from the symbol prefix: ChiNext under market 0 starts with
    "3", STAR under market 1 starts with "688".
    """
    parsed = InstrumentCode.parse(code)
    if parsed is None:
        return MarketTag.DOMESTIC
    market_id = parsed.market_id
    if market_id in HK_MARKETS:
        return MarketTag.HK
    if market_id in US_MARKETS:
        return MarketTag.US
    if parsed.market == "0" and parsed.symbol.startswith("3"):
        return MarketTag.GROWTH
    if parsed.market == "1" and parsed.symbol.startswith("688"):
        return MarketTag.STAR
    return MarketTag.DOMESTIC
