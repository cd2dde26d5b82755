"""Latest-quote cache."""

from typing import Mapping, Optional

from stockwatch.domain.models import Quote


class QuoteCache:
    """
    Mapping of instrument code to its latest quote.

    Written once per cycle by replace_all; never patched per field.
    """

    def __init__(self) -> None:
        self._quotes: dict[str, Quote] = {}

    def replace_all(self, quotes: Mapping[str, Quote]) -> None:
        self._quotes = dict(quotes)

    def get(self, code: str) -> Optional[Quote]:
        return self._quotes.get(code)

    def __contains__(self, code: str) -> bool:
        return code in self._quotes

    def __len__(self) -> int:
        return len(self._quotes)
