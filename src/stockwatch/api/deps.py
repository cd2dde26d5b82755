"""Dependency injection for FastAPI."""

from stockwatch.app_context import AppContext, get_app_context
from stockwatch.services import QuoteEngine


def get_context() -> AppContext:
    """Provide the application context."""
    return get_app_context()


def get_engine() -> QuoteEngine:
    """Provide the shared QuoteEngine instance."""
    return get_app_context().engine
