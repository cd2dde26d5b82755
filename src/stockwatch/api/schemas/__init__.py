"""Pydantic schemas for API request/response."""

from stockwatch.api.schemas.quotes import DisplayNodeResponse, VersionResponse
from stockwatch.api.schemas.holdings import (
    HoldingResponse,
    HoldingUpdate,
    HoldingUpdateResponse,
)
from stockwatch.api.schemas.watchlist import WatchlistResponse, WatchlistUpdate

__all__ = [
    "DisplayNodeResponse",
    "VersionResponse",
    "HoldingResponse",
    "HoldingUpdate",
    "HoldingUpdateResponse",
    "WatchlistResponse",
    "WatchlistUpdate",
]
