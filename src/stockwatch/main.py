"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stockwatch.app_context import get_app_context
from stockwatch.config.settings import get_settings
from stockwatch.config.logging_config import setup_logging
from stockwatch.api.routers import (
    quotes_router,
    holdings_router,
    watchlist_router,
    links_router,
)
from stockwatch.core.exceptions import AppError, NotFoundError
from stockwatch.services import RefreshTrigger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the quote engine with the app; stop its timer on shutdown."""
    setup_logging()
    engine = get_app_context().engine
    logger.info("Starting %s", settings.app_name)
    engine.request_refresh(RefreshTrigger.MANUAL)
    engine.start()
    yield
    engine.stop()
    await engine.wait_idle()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Watch-list quote polling and portfolio P&L tree",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(quotes_router)
app.include_router(holdings_router)
app.include_router(watchlist_router)
app.include_router(links_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
