"""Quote providers module."""

from stockwatch.providers.market_data_provider import QuoteProvider
from stockwatch.providers.eastmoney_provider import EastmoneyQuoteProvider
from stockwatch.providers.stub_provider import StubQuoteProvider

__all__ = [
    "QuoteProvider",
    "EastmoneyQuoteProvider",
    "StubQuoteProvider",
]
