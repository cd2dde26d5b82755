"""Stock watch-list quote engine."""

__version__ = "0.1.0"
