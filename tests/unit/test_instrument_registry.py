"""
Unit tests for watch-list parsing.

Tests cover:
- Tagged parse outcomes for "code" and "code:shares"
- Silent discard of malformed entries
- Default index substitution
- Ordering, duplicates and idempotent reloads
"""

from decimal import Decimal

import pytest

from stockwatch.domain.models import ParseOutcome
from stockwatch.services import InstrumentRegistry, parse_entry


# =============================================================================
# SINGLE ENTRY PARSING
# =============================================================================


class TestParseEntry:
    """Tests for parse_entry."""

    def test_code_with_shares_is_holding(self):
        """
        GIVEN "1.000001:10"
        WHEN I parse it
        THEN it yields the code with a holding of 10
        """
        parsed = parse_entry("1.000001:10")

        assert parsed.outcome is ParseOutcome.HOLDING
        assert parsed.code == "1.000001"
        assert parsed.shares == Decimal("10")

    def test_bare_code_is_instrument(self):
        parsed = parse_entry("116.00700")

        assert parsed.outcome is ParseOutcome.INSTRUMENT
        assert parsed.code == "116.00700"
        assert parsed.shares is None

    @pytest.mark.parametrize("raw", ["1.000001:-5", "1.000001:abc", "1.000001:0", "1.000001:", "1.000001:nan"])
    def test_bad_shares_keep_code_without_holding(self, raw):
        """
        GIVEN a code with a negative, zero, non-numeric or missing share count
        WHEN I parse it
        THEN the code is kept and no holding is recorded
        """
        parsed = parse_entry(raw)

        assert parsed.outcome is ParseOutcome.INSTRUMENT
        assert parsed.code == "1.000001"
        assert parsed.shares is None

    @pytest.mark.parametrize("raw", ["", "   ", ":10", " : 5", "1.000 001"])
    def test_malformed_entries_are_discarded(self, raw):
        parsed = parse_entry(raw)

        assert parsed.is_discarded
        assert parsed.code is None

    def test_whitespace_is_trimmed_around_parts(self):
        parsed = parse_entry("  0.300750 :  200 ")

        assert parsed.code == "0.300750"
        assert parsed.shares == Decimal("200")

    def test_fractional_shares_are_accepted(self):
        parsed = parse_entry("105.AAPL:1.5")

        assert parsed.outcome is ParseOutcome.HOLDING
        assert parsed.shares == Decimal("1.5")


# =============================================================================
# REGISTRY LOADING
# =============================================================================


class TestInstrumentRegistry:
    """Tests for InstrumentRegistry.load."""

    def test_load_preserves_order_and_holdings(self):
        registry = InstrumentRegistry()

        state = registry.load(["116.00700:100", "1.000001", "0.300750:200"])

        assert state.instrument_codes == ["116.00700", "1.000001", "0.300750"]
        assert state.holdings == {"116.00700": Decimal("100"), "0.300750": Decimal("200")}

    def test_empty_configuration_uses_default_index(self):
        """
        GIVEN no usable entries
        WHEN I load the registry
        THEN the default index code is substituted
        """
        registry = InstrumentRegistry(default_code="1.000001")

        state = registry.load(["", "  ", ":3"])

        assert state.instrument_codes == ["1.000001"]
        assert state.holdings == {}

    def test_duplicate_codes_are_kept_and_later_holding_wins(self):
        registry = InstrumentRegistry()

        state = registry.load(["1.000001:5", "1.000001:7"])

        assert state.instrument_codes == ["1.000001", "1.000001"]
        assert state.holdings == {"1.000001": Decimal("7")}

    def test_reload_is_idempotent(self):
        registry = InstrumentRegistry()
        entries = ["1.000001", "116.00700:100", "bad entry", "105.AAPL:x"]

        first = registry.load(entries)
        second = registry.load(entries)

        assert first == second

    def test_reload_replaces_state_wholesale(self):
        registry = InstrumentRegistry()
        registry.load(["1.000001:10"])

        state = registry.load(["116.00700"])

        assert state.instrument_codes == ["116.00700"]
        assert state.holdings == {}
