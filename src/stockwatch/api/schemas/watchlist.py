"""Pydantic schemas for the raw watch-list configuration."""

from pydantic import BaseModel


class WatchlistResponse(BaseModel):
    """Raw entries plus what the registry parsed from them."""

    entries: list[str]
    instrument_codes: list[str]
    holdings: dict[str, float]


class WatchlistUpdate(BaseModel):
    """Replacement list of "code" / "code:shares" entries."""

    entries: list[str]
