"""Pydantic schemas for holdings endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from stockwatch.api.schemas.quotes import DisplayNodeResponse


class HoldingResponse(BaseModel):
    """Current holding for an instrument (0 when none)."""

    code: str
    shares: float


class HoldingUpdate(BaseModel):
    """Raw text from the edit dialog; empty clears the holding."""

    shares: Optional[Union[str, float]] = Field(
        default="", description="Whole number >= 0, or empty to clear"
    )


class HoldingUpdateResponse(BaseModel):
    """Outcome of a holdings edit with the refreshed root list."""

    code: str
    shares: int
    message: str
    items: list[DisplayNodeResponse]
