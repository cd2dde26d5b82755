"""Stub quote provider for offline/testing use."""

import random
from typing import Any

from stockwatch.domain.models.instrument import InstrumentCode, profile_for_market

# Deterministic raw records (provider-scaled integers) for common codes
_STUB_RECORDS: dict[str, dict[str, Any]] = {
    "1.000001": {"f14": "上证指数", "f2": 305218, "f4": 1532, "f3": 50, "f18": 303686},
    "0.399001": {"f14": "深证成指", "f2": 968120, "f4": -4510, "f3": -46, "f18": 972630},
    "0.300750": {"f14": "宁德时代", "f2": 18820, "f4": 356, "f3": 193, "f18": 18464},
    "1.688981": {"f14": "中芯国际", "f2": 8712, "f4": -98, "f3": -111, "f18": 8810},
    "116.00700": {"f14": "腾讯控股", "f2": 372400, "f4": 4200, "f3": 114, "f18": 368200},
    "105.AAPL": {"f14": "苹果", "f2": 185500, "f4": 1250, "f3": 68, "f18": 184250},
}


class StubQuoteProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Uses predefined records for common codes; generates seeded random records
    for unknown codes. Codes without a market id are omitted, as the real
    endpoint does.
    """

    def __init__(self, seed: int = 42):
        """Initialize with optional random seed for reproducibility."""
        self._rng = random.Random(seed)
        self.calls: list[list[str]] = []

    def fetch_batch(self, codes: list[str]) -> Any:
        """Return a response body shaped like the live endpoint's."""
        self.calls.append(list(codes))
        diff = []
        for code in codes:
            parsed = InstrumentCode.parse(code)
            if parsed is None or parsed.market_id is None or not parsed.symbol:
                continue
            record = _STUB_RECORDS.get(code) or self._random_record(parsed)
            diff.append({"f12": parsed.symbol, "f13": parsed.market_id, **record})
        return {"rc": 0, "data": {"total": len(diff), "diff": diff}}

    def _random_record(self, parsed: InstrumentCode) -> dict[str, Any]:
        divisor = profile_for_market(parsed.market_id).divisor
        prev_close = int((5 + self._rng.random() * 195) * divisor)
        change = int(prev_close * (self._rng.random() - 0.5) * 0.04)
        return {
            "f14": parsed.symbol,
            "f2": prev_close + change,
            "f4": change,
            "f3": round(change * 10000 / prev_close),
            "f18": prev_close,
        }
