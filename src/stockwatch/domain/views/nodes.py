"""Render-agnostic tree row descriptions."""

from dataclasses import dataclass
from typing import Optional

from stockwatch.domain.models.enums import NodeKind


@dataclass(frozen=True)
class DisplayNode:
    """
    One row of the quote tree.

    icon and color are opaque style tokens for the host renderer. code is set
    on rows that target an instrument (for detail expansion and holdings
    edits).
    """

    label: str
    kind: NodeKind
    expandable: bool = False
    description: str = ""
    icon: Optional[str] = None
    color: Optional[str] = None
    code: Optional[str] = None
