"""External link redirects."""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from stockwatch.api.deps import get_context
from stockwatch.app_context import AppContext

router = APIRouter(tags=["links"])


@router.get("/website", response_class=RedirectResponse, status_code=307)
def open_website(context: AppContext = Depends(get_context)):
    """Redirect to the quote provider's website."""
    return RedirectResponse(context.settings.website_url, status_code=307)
