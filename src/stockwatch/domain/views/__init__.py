"""View models for service outputs."""

from stockwatch.domain.views.nodes import DisplayNode

__all__ = [
    "DisplayNode",
]
