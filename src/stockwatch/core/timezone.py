"""Timezone utilities for the quote market clock."""

from datetime import datetime

import pytz

MARKET_TZ = pytz.timezone("Asia/Shanghai")

UPDATE_TIME_FORMAT = "%H:%M:%S"


def now_market() -> datetime:
    """Return current time in the market timezone."""
    return datetime.now(MARKET_TZ)


def to_market(dt: datetime) -> datetime:
    """Convert a datetime to the market timezone."""
    if dt.tzinfo is None:
        # Assume naive datetime is already market time
        return MARKET_TZ.localize(dt)
    return dt.astimezone(MARKET_TZ)


def format_update_time(dt: datetime) -> str:
    """Format a batch timestamp as wall-clock HH:MM:SS in market time."""
    return to_market(dt).strftime(UPDATE_TIME_FORMAT)
