"""Watch-list API: read and replace the raw configuration entries."""

from fastapi import APIRouter, Depends

from stockwatch.api.deps import get_context
from stockwatch.api.schemas import WatchlistResponse, WatchlistUpdate
from stockwatch.app_context import AppContext

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def _response(context: AppContext) -> WatchlistResponse:
    state = context.engine.state
    return WatchlistResponse(
        entries=context.store.get_list(context.settings.watchlist_key),
        instrument_codes=list(state.instrument_codes),
        holdings={code: float(shares) for code, shares in state.holdings.items()},
    )


@router.get("", response_model=WatchlistResponse)
def get_watchlist(context: AppContext = Depends(get_context)):
    return _response(context)


@router.put("", response_model=WatchlistResponse)
async def replace_watchlist(
    data: WatchlistUpdate,
    context: AppContext = Depends(get_context),
):
    """Replace the entries; the change notification schedules a refresh."""
    context.store.set_list(context.settings.watchlist_key, list(data.entries))
    # listener already queued the refresh; reload so the response is current
    context.engine.reload_registry()
    return _response(context)
