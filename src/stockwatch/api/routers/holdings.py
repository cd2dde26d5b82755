"""Holdings API: read and edit per-instrument share counts."""

from fastapi import APIRouter, Depends

from stockwatch.api.deps import get_engine
from stockwatch.api.schemas import (
    DisplayNodeResponse,
    HoldingResponse,
    HoldingUpdate,
    HoldingUpdateResponse,
)
from stockwatch.core.exceptions import ValidationError
from stockwatch.services import QuoteEngine, parse_shares_input
from stockwatch.services.instrument_registry import parse_entry

router = APIRouter(prefix="/holdings", tags=["holdings"])


def _validated_code(code: str) -> str:
    parsed = parse_entry(code)
    if parsed.is_discarded or parsed.code != code.strip():
        raise ValidationError(f"Invalid instrument code: {code!r}")
    return parsed.code


@router.get("/{code}", response_model=HoldingResponse)
def get_holding(code: str, engine: QuoteEngine = Depends(get_engine)):
    """Current share count, used to pre-fill the edit dialog."""
    code = _validated_code(code)
    return HoldingResponse(code=code, shares=float(engine.current_holding(code)))


@router.put("/{code}", response_model=HoldingUpdateResponse)
async def update_holding(
    code: str,
    data: HoldingUpdate,
    engine: QuoteEngine = Depends(get_engine),
):
    """
    Set or clear a holding.

    - shares: whole number >= 0; empty or 0 clears the holding but keeps
      the instrument on the watch-list.
    - Invalid input returns 400 VALIDATION_ERROR and changes nothing.
    """
    code = _validated_code(code)
    raw = "" if data.shares is None else str(data.shares)
    shares = parse_shares_input(raw)
    await engine.update_holding(code, shares)

    if shares > 0:
        message = f"Holding of {code} set to {shares} shares"
    else:
        message = f"Holding of {code} cleared"
    return HoldingUpdateResponse(
        code=code,
        shares=shares,
        message=message,
        items=[DisplayNodeResponse.from_node(n) for n in engine.get_root_items()],
    )
