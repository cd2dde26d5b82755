"""Shared sign, arrow and color formatting for change values."""

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    localcontext,
)

UP_GLYPH = "↑"
DOWN_GLYPH = "↓"
UP_COLOR = "charts.red"
DOWN_COLOR = "charts.green"
UP_ICON = "arrow-up"
DOWN_ICON = "arrow-down"

_TWO_PLACES = Decimal("0.01")

# Exact products, sums and quantizations of any finite value. Not for division.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ChangeStyle:
    """Presentation triple derived from a signed change value."""

    glyph: str
    color: str
    icon: str
    formatted: str

    @property
    def is_up(self) -> bool:
        return self.glyph == UP_GLYPH


def exact_product(a: Decimal, b: Decimal) -> Decimal:
    """Multiply without rounding or overflow (e.g. change x shares)."""
    with localcontext(EXACT_CONTEXT):
        return a * b


def format_signed(value: Decimal) -> str:
    """
    Format a value to two decimals with an explicit sign.

    Non-negative values get a leading "+"; negative values keep "-".
    Works for values of any magnitude.
    """
    with localcontext(EXACT_CONTEXT):
        quantized = value.quantize(_TWO_PLACES)
        if value >= 0:
            return f"+{abs(quantized):.2f}"
        return f"{quantized:.2f}"


def change_style(value: Decimal) -> ChangeStyle:
    """Map a signed change to its glyph, color class and signed text (zero is up)."""
    if value >= 0:
        return ChangeStyle(UP_GLYPH, UP_COLOR, UP_ICON, format_signed(value))
    return ChangeStyle(DOWN_GLYPH, DOWN_COLOR, DOWN_ICON, format_signed(value))


def format_fixed(value: Decimal, places: int) -> str:
    """Format a decimal to a fixed number of places (half-up rounding)."""
    with localcontext(EXACT_CONTEXT):
        exponent = Decimal(1).scaleb(-places)
        return f"{value.quantize(exponent):.{places}f}"
