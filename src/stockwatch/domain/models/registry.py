"""Watch-list registry models."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from stockwatch.domain.models.enums import ParseOutcome


@dataclass(frozen=True)
class ParsedEntry:
    """Outcome of parsing one raw "code" or "code:shares" entry."""

    outcome: ParseOutcome
    raw: str
    code: Optional[str] = None
    shares: Optional[Decimal] = None

    @property
    def is_discarded(self) -> bool:
        return self.outcome is ParseOutcome.DISCARDED


@dataclass
class RegistryState:
    """Ordered instrument codes plus the holdings map."""

    instrument_codes: list[str] = field(default_factory=list)
    holdings: dict[str, Decimal] = field(default_factory=dict)

    def shares_for(self, code: str) -> Optional[Decimal]:
        return self.holdings.get(code)
