"""Quote tree API: root and detail nodes, manual refresh."""

from fastapi import APIRouter, Depends

from stockwatch.api.deps import get_engine
from stockwatch.api.schemas import DisplayNodeResponse, VersionResponse
from stockwatch.core.exceptions import NotFoundError
from stockwatch.services import QuoteEngine, RefreshTrigger

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.get("", response_model=list[DisplayNodeResponse])
def get_root_items(engine: QuoteEngine = Depends(get_engine)):
    """Root rows: one per instrument, then portfolio P&L and update time."""
    return [DisplayNodeResponse.from_node(n) for n in engine.get_root_items()]


@router.get("/version", response_model=VersionResponse)
def get_version(engine: QuoteEngine = Depends(get_engine)):
    """Change counter bumped on every reload, completed cycle or holdings edit."""
    return VersionResponse(
        version=engine.version,
        loading=engine.is_loading,
        refreshing=engine.is_refreshing,
        last_update_time=engine.last_update_time,
    )


@router.get("/{code}/details", response_model=list[DisplayNodeResponse])
def get_detail_items(code: str, engine: QuoteEngine = Depends(get_engine)):
    """Detail rows for one instrument; empty when it has no quote."""
    if code not in engine.state.instrument_codes:
        raise NotFoundError("Instrument", code)
    return [DisplayNodeResponse.from_node(n) for n in engine.get_detail_items(code)]


@router.post("/refresh", response_model=list[DisplayNodeResponse])
async def refresh(engine: QuoteEngine = Depends(get_engine)):
    """Reload the watch-list and fetch quotes now."""
    await engine.refresh(RefreshTrigger.MANUAL)
    return [DisplayNodeResponse.from_node(n) for n in engine.get_root_items()]
