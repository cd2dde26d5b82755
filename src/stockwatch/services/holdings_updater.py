"""Holding-quantity rewrites of the serialized watch-list."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable

from stockwatch.core.exceptions import ValidationError
from stockwatch.repositories.protocols import WatchlistStore
from stockwatch.services.instrument_registry import parse_shares, split_entry

logger = logging.getLogger(__name__)

# Exclusive upper bound on share counts entered by hand
MAX_SHARES_INPUT = Decimal("1e15")


def parse_shares_input(text: str) -> int:
    """
    Validate a user-entered share count.

    Empty input means "clear the holding" and returns 0. Raises
    ValidationError for non-numeric, negative, fractional or oversized
    input.
    """
    value = (text or "").strip()
    if not value:
        return 0
    try:
        number = Decimal(value)
    except (InvalidOperation, ValueError):
        raise ValidationError("Please enter a valid number.")
    if not number.is_finite():
        raise ValidationError("Please enter a valid number.")
    if number < 0:
        raise ValidationError("Shares cannot be negative.")
    if number >= MAX_SHARES_INPUT:
        raise ValidationError("Share count is too large.")
    if number != number.to_integral_value():
        raise ValidationError("Please enter a whole number of shares.")
    return int(number)


def rewrite_entries(entries: Iterable[str], code: str, shares: int) -> list[str]:
    """
    Return the watch-list with code's holding set to shares.

    Matching entries become "code:shares", or bare "code" when shares is 0.
    Other entries pass through trimmed. An unknown code is appended only
    when shares > 0. Empty entries are dropped.
    """
    if shares < 0:
        raise ValidationError("Shares cannot be negative.")

    target = f"{code}:{shares}" if shares > 0 else code
    rewritten: list[str] = []
    found = False
    for raw in entries:
        entry = (raw or "").strip()
        if not entry:
            continue
        entry_code, _ = split_entry(entry)
        if entry_code == code:
            found = True
            rewritten.append(target)
        else:
            rewritten.append(entry)

    if not found and shares > 0:
        rewritten.append(target)
    return rewritten


def current_holding(entries: Iterable[str], code: str) -> Decimal:
    """Holding recorded by the first entry for code, or 0."""
    for raw in entries:
        entry_code, shares_text = split_entry((raw or "").strip())
        if entry_code != code:
            continue
        if shares_text is None:
            return Decimal("0")
        return parse_shares(shares_text) or Decimal("0")
    return Decimal("0")


class HoldingsUpdater:
    """Persists holding changes into the settings store."""

    def __init__(self, store: WatchlistStore, key: str):
        self._store = store
        self._key = key

    def current(self, code: str) -> Decimal:
        return current_holding(self._store.get_list(self._key), code)

    def update(self, code: str, shares: int) -> list[str]:
        """Rewrite and persist the watch-list; returns the new entries."""
        entries = rewrite_entries(self._store.get_list(self._key), code, shares)
        self._store.set_list(self._key, entries)
        if shares > 0:
            logger.info("Set holding of %s to %d shares", code, shares)
        else:
            logger.info("Cleared holding of %s", code)
        return entries
