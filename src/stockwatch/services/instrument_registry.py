"""Watch-list parsing into the instrument registry."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from stockwatch.domain.models import ParseOutcome, ParsedEntry, RegistryState

logger = logging.getLogger(__name__)

DEFAULT_INSTRUMENT_CODE = "1.000001"


def split_entry(raw: str) -> tuple[str, Optional[str]]:
    """Split a trimmed entry on its first ':' into (code, shares text or None)."""
    code, sep, rest = raw.partition(":")
    return code.strip(), (rest.strip() if sep else None)


def parse_shares(text: str) -> Optional[Decimal]:
    """Parse a holding quantity; None unless finite and strictly positive."""
    try:
        shares = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not shares.is_finite() or shares <= 0:
        return None
    return shares


def parse_entry(raw: str) -> ParsedEntry:
    """
    Parse one raw "code" or "code:shares" entry.

    Empty entries and entries with a missing or malformed code are
    DISCARDED. A bad shares part keeps the code without a holding.
    """
    text = (raw or "").strip()
    if not text:
        return ParsedEntry(ParseOutcome.DISCARDED, raw=raw)

    code, shares_text = split_entry(text)
    if not code or any(ch.isspace() for ch in code):
        return ParsedEntry(ParseOutcome.DISCARDED, raw=raw)

    if shares_text is not None:
        shares = parse_shares(shares_text)
        if shares is not None:
            return ParsedEntry(ParseOutcome.HOLDING, raw=raw, code=code, shares=shares)
    return ParsedEntry(ParseOutcome.INSTRUMENT, raw=raw, code=code)


class InstrumentRegistry:
    """Builds RegistryState from raw configuration entries."""

    def __init__(self, default_code: str = DEFAULT_INSTRUMENT_CODE):
        self._default_code = default_code

    @property
    def default_code(self) -> str:
        return self._default_code

    def load(self, entries: Iterable[str]) -> RegistryState:
        """
        Parse entries into a fresh registry state.

        Configuration order is kept. Later holdings for a repeated code
        overwrite earlier ones. An empty result falls back to the default
        index code.
        """
        state = RegistryState()
        for raw in entries:
            parsed = parse_entry(raw)
            if parsed.is_discarded:
                continue
            state.instrument_codes.append(parsed.code)
            if parsed.outcome is ParseOutcome.HOLDING:
                state.holdings[parsed.code] = parsed.shares

        if not state.instrument_codes:
            state.instrument_codes = [self._default_code]

        logger.debug("Loaded instrument codes: %s", state.instrument_codes)
        logger.debug("Loaded holdings: %s", state.holdings)
        return state
