"""Enumerations for domain models."""

from enum import Enum


class MarketTag(str, Enum):
    """Market classification shown as a suffix on instrument rows."""

    DOMESTIC = "DOMESTIC"
    HK = "HK"
    US = "US"
    GROWTH = "GROWTH"  # ChiNext board (market 0, symbol 3xxxxx)
    STAR = "STAR"  # STAR market (market 1, symbol 688xxx)

    @property
    def suffix(self) -> str:
        return _TAG_SUFFIXES[self]

    @property
    def color(self) -> str:
        return _TAG_COLORS[self]


_TAG_SUFFIXES = {
    MarketTag.DOMESTIC: "",
    MarketTag.HK: " ［港］",
    MarketTag.US: " ［美］",
    MarketTag.GROWTH: " ［创］",
    MarketTag.STAR: " ［科］",
}

_TAG_COLORS = {
    MarketTag.DOMESTIC: "charts.green",
    MarketTag.HK: "charts.purple",
    MarketTag.US: "charts.blue",
    MarketTag.GROWTH: "charts.orange",
    MarketTag.STAR: "charts.yellow",
}


class NodeKind(str, Enum):
    """Kinds of display rows produced by the view-model builder."""

    LOADING = "LOADING"
    INSTRUMENT = "INSTRUMENT"
    FAILED = "FAILED"
    TOTAL_PNL = "TOTAL_PNL"
    UPDATE_TIME = "UPDATE_TIME"
    DETAIL = "DETAIL"


class ParseOutcome(str, Enum):
    """Result tag of parsing one raw watch-list entry."""

    INSTRUMENT = "INSTRUMENT"
    HOLDING = "HOLDING"
    DISCARDED = "DISCARDED"
