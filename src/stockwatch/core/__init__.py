"""Core utilities and shared functionality."""

from stockwatch.core.timezone import (
    now_market,
    to_market,
    format_update_time,
    MARKET_TZ,
)
from stockwatch.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    QuoteFetchError,
)
from stockwatch.core.formatting import (
    ChangeStyle,
    change_style,
    format_signed,
    format_fixed,
)

__all__ = [
    "now_market",
    "to_market",
    "format_update_time",
    "MARKET_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "QuoteFetchError",
    "ChangeStyle",
    "change_style",
    "format_signed",
    "format_fixed",
]
