"""Quote snapshot model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Quote:
    """
    Latest quote for one instrument.

    Numeric fields are pre-formatted decimal strings at the market's fixed
    precision. update_time is shared by every quote of the same batch.
    """

    code: str
    name: str
    current: str
    change: str
    change_percent: str
    previous_close: str
    update_time: str

    @property
    def change_value(self) -> Decimal:
        return Decimal(self.change)
