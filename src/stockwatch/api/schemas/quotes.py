"""Pydantic schemas for quote tree endpoints."""

from typing import Optional

from pydantic import BaseModel

from stockwatch.domain.models import NodeKind
from stockwatch.domain.views import DisplayNode


class DisplayNodeResponse(BaseModel):
    """One tree row as consumed by a renderer."""

    label: str
    kind: NodeKind
    expandable: bool
    description: str
    icon: Optional[str] = None
    color: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_node(cls, node: DisplayNode) -> "DisplayNodeResponse":
        return cls(
            label=node.label,
            kind=node.kind,
            expandable=node.expandable,
            description=node.description,
            icon=node.icon,
            color=node.color,
            code=node.code,
        )


class VersionResponse(BaseModel):
    """Change counter for pollers, plus loading/refresh flags."""

    version: int
    loading: bool
    refreshing: bool
    last_update_time: Optional[str] = None
