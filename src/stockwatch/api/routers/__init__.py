"""API routers."""

from stockwatch.api.routers.quotes import router as quotes_router
from stockwatch.api.routers.holdings import router as holdings_router
from stockwatch.api.routers.watchlist import router as watchlist_router
from stockwatch.api.routers.links import router as links_router

__all__ = ["quotes_router", "holdings_router", "watchlist_router", "links_router"]
