"""Root and detail display-node construction."""

from decimal import Decimal, localcontext
from typing import Optional

from stockwatch.core.formatting import EXACT_CONTEXT, change_style, exact_product
from stockwatch.domain.models import (
    NodeKind,
    Quote,
    RegistryState,
    classify_market_tag,
)
from stockwatch.domain.views import DisplayNode
from stockwatch.services.quote_cache import QuoteCache

LOADING_TEXT = "加载中..."
FAILED_TEXT = "加载失败"
TOTAL_PNL_LABEL = "今日盈亏"
UPDATE_TIME_LABEL = "更新时间"
PREVIOUS_CLOSE_LABEL = "昨日收盘"
CHANGE_POINTS_LABEL = "涨跌点数"
SHARES_LABEL = "持有股数"
POSITION_PNL_LABEL = "今日盈亏"

INSTRUMENT_ICON = "circle-filled"


def format_shares(shares: Decimal) -> str:
    """Render a share count without trailing zeros or exponent."""
    with localcontext(EXACT_CONTEXT):
        if shares == shares.to_integral_value():
            return format(shares.quantize(Decimal(1)), "f")
        return format(shares.normalize(), "f")


def total_profit_loss(state: RegistryState, cache: QuoteCache) -> Optional[Decimal]:
    """
    Sum change x shares over held instruments that have a quote.

    Returns None when no held instrument has a quote.
    """
    total: Optional[Decimal] = None
    with localcontext(EXACT_CONTEXT):
        for code, shares in state.holdings.items():
            quote = cache.get(code)
            if quote is None or shares <= 0:
                continue
            total = (total or Decimal("0")) + quote.change_value * shares
    return total


class ViewModelBuilder:
    """Pure functions from engine state to display nodes."""

    def __init__(
        self,
        placeholder_code: str = "1.000001",
        placeholder_label: str = "上证指数",
    ):
        self._placeholder_code = placeholder_code
        self._placeholder_label = placeholder_label

    def root_items(
        self,
        state: RegistryState,
        cache: QuoteCache,
        loading: bool,
        last_update_time: Optional[str] = None,
    ) -> list[DisplayNode]:
        """Build the root list: instruments, portfolio P&L, update time."""
        if loading:
            return [self._loading_node()]

        items = [self._instrument_node(code, cache.get(code)) for code in state.instrument_codes]

        total = total_profit_loss(state, cache)
        if total is not None:
            style = change_style(total)
            items.append(
                DisplayNode(
                    label=TOTAL_PNL_LABEL,
                    kind=NodeKind.TOTAL_PNL,
                    description=style.formatted,
                    icon=style.icon,
                    color=style.color,
                )
            )

        if last_update_time:
            items.append(
                DisplayNode(
                    label=UPDATE_TIME_LABEL,
                    kind=NodeKind.UPDATE_TIME,
                    description=last_update_time,
                    icon="clock",
                )
            )
        return items

    def detail_items(
        self,
        code: str,
        state: RegistryState,
        cache: QuoteCache,
    ) -> list[DisplayNode]:
        """Build the rows shown under an expanded instrument."""
        quote = cache.get(code)
        if quote is None:
            return []

        style = change_style(quote.change_value)
        items = [
            DisplayNode(
                label=PREVIOUS_CLOSE_LABEL,
                kind=NodeKind.DETAIL,
                description=quote.previous_close,
                icon="symbol-number",
                color="charts.blue",
            ),
            DisplayNode(
                label=CHANGE_POINTS_LABEL,
                kind=NodeKind.DETAIL,
                description=f"{style.glyph} {quote.change}",
                icon=style.icon,
                color=style.color,
            ),
        ]

        shares = state.shares_for(code)
        if shares:
            pnl = exact_product(quote.change_value, shares)
            pnl_style = change_style(pnl)
            items.append(
                DisplayNode(
                    label=SHARES_LABEL,
                    kind=NodeKind.DETAIL,
                    description=format_shares(shares),
                    icon="database",
                    color="charts.purple",
                )
            )
            items.append(
                DisplayNode(
                    label=POSITION_PNL_LABEL,
                    kind=NodeKind.DETAIL,
                    description=pnl_style.formatted,
                    icon=pnl_style.icon,
                    color=pnl_style.color,
                )
            )
        return items

    def _loading_node(self) -> DisplayNode:
        return DisplayNode(
            label=self._placeholder_label,
            kind=NodeKind.LOADING,
            expandable=True,
            description=LOADING_TEXT,
            icon="loading~spin",
            code=self._placeholder_code,
        )

    @staticmethod
    def _instrument_node(code: str, quote: Optional[Quote]) -> DisplayNode:
        if quote is None:
            return DisplayNode(
                label=code,
                kind=NodeKind.FAILED,
                expandable=True,
                description=FAILED_TEXT,
                icon="error",
                code=code,
            )

        style = change_style(quote.change_value)
        tag = classify_market_tag(code)
        return DisplayNode(
            label=quote.name,
            kind=NodeKind.INSTRUMENT,
            expandable=True,
            description=f"{quote.current} {style.glyph} {quote.change_percent}%{tag.suffix}",
            icon=INSTRUMENT_ICON,
            color=tag.color,
            code=code,
        )
