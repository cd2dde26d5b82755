"""Batch quote fetch and per-market decoding."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from stockwatch.core.exceptions import QuoteFetchError
from stockwatch.core.formatting import format_fixed
from stockwatch.domain.models import InstrumentCode, Quote, profile_for_market
from stockwatch.providers.market_data_provider import QuoteProvider

logger = logging.getLogger(__name__)

PERCENT_DIVISOR = 100
PERCENT_PLACES = 2


@dataclass
class FetchResult:
    """Quotes decoded from one batch; ok is False when the cycle aborted."""

    quotes: dict[str, Quote] = field(default_factory=dict)
    ok: bool = True


def _scaled(raw: Any, divisor: int, places: int) -> str:
    value = Decimal(str(raw))
    if not value.is_finite():
        raise InvalidOperation(f"non-finite field value {raw!r}")
    return format_fixed(value / divisor, places)


def decode_record(record: Mapping[str, Any], update_time: str) -> Quote:
    """
    Decode one provider record into a normalized Quote.

    Price, change and previous close are divided by the market divisor
    (1000 for HK/US, 100 otherwise); the percentage is always /100 at two
    places. Raises ValueError/InvalidOperation/KeyError on malformed fields.
    """
    market_id = int(record["f13"])
    code = str(InstrumentCode.from_parts(market_id, record["f12"]))
    profile = profile_for_market(market_id)

    return Quote(
        code=code,
        name=record.get("f14") or code,
        current=_scaled(record["f2"], profile.divisor, profile.places),
        change=_scaled(record["f4"], profile.divisor, profile.places),
        change_percent=_scaled(record["f3"], PERCENT_DIVISOR, PERCENT_PLACES),
        previous_close=_scaled(record["f18"], profile.divisor, profile.places),
        update_time=update_time,
    )


def extract_records(payload: Any) -> Optional[list]:
    """Return the data.diff collection, or None when absent or malformed."""
    if not isinstance(payload, Mapping):
        return None
    data = payload.get("data")
    if not isinstance(data, Mapping):
        return None
    diff = data.get("diff")
    if isinstance(diff, Mapping):
        # the endpoint sometimes keys records by index
        diff = list(diff.values())
    if not isinstance(diff, list):
        return None
    return diff


def decode_batch(payload: Any, update_time: str) -> dict[str, Quote]:
    """Decode a response body into a fresh code -> Quote map."""
    records = extract_records(payload)
    if records is None:
        logger.warning("Batch quote response has no result collection")
        return {}

    quotes: dict[str, Quote] = {}
    for record in records:
        if not record:
            continue
        try:
            quote = decode_record(record, update_time)
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Skipping malformed quote record %r: %s", record, e)
            continue
        logger.debug(
            "Decoded %s: name=%s current=%s prev_close=%s change=%s pct=%s%%",
            quote.code, quote.name, quote.current, quote.previous_close,
            quote.change, quote.change_percent,
        )
        quotes[quote.code] = quote

    logger.info("Decoded %d of %d quote records", len(quotes), len(records))
    return quotes


class QuoteFetcher:
    """Runs one batched request per cycle and decodes the result."""

    def __init__(self, provider: QuoteProvider):
        self._provider = provider

    def fetch(self, codes: list[str], update_time: str) -> FetchResult:
        """
        Fetch and decode quotes for all codes.

        Never raises: a transport or body failure yields an empty,
        not-ok result so the caller clears rather than keeps stale data.
        """
        if not codes:
            return FetchResult()

        logger.info("Fetching batch quotes for %d instruments", len(codes))
        try:
            payload = self._provider.fetch_batch(codes)
        except QuoteFetchError as e:
            logger.error("Batch quote fetch failed: %s", e)
            return FetchResult(ok=False)

        try:
            quotes = decode_batch(payload, update_time)
        except Exception:
            logger.exception("Batch quote decoding failed")
            return FetchResult(ok=False)
        return FetchResult(quotes=quotes)
