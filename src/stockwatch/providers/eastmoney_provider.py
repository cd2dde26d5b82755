"""Batched quote transport for the Eastmoney push2 list endpoint."""

import logging
from typing import Any, Optional
from urllib.parse import urlencode

import requests

from stockwatch.core.exceptions import QuoteFetchError

logger = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json, text/plain, */*",
    "Referer": "https://quote.eastmoney.com/",
}

DEFAULT_URL = "http://push2.eastmoney.com/api/qt/ulist.np/get"
# f12 symbol, f13 market id, f14 name, f2 price, f4 change, f3 change %, f18 prev close
DEFAULT_FIELDS = "f12,f13,f14,f2,f4,f3,f18"


class EastmoneyQuoteProvider:
    """Issues one GET per batch with comma-joined secids."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        fields: str = DEFAULT_FIELDS,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._url = url
        self._fields = fields
        self._timeout = timeout
        self._session = session or requests.Session()

    def build_query(self, codes: list[str]) -> str:
        """Query string for a batch; commas stay literal."""
        return urlencode({"secids": ",".join(codes), "fields": self._fields}, safe=",")

    def fetch_batch(self, codes: list[str]) -> Any:
        query = self.build_query(codes)
        try:
            resp = self._session.get(
                self._url,
                params=query,
                headers=_HEADERS,
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise QuoteFetchError(f"Batch quote request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise QuoteFetchError(f"Batch quote response is not JSON: {e}") from e

    def close(self) -> None:
        self._session.close()
