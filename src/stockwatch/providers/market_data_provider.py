"""Quote provider protocol."""

from typing import Any, Protocol


class QuoteProvider(Protocol):
    """
    Protocol for batched quote transports.

    One call issues one request for every code and returns the decoded JSON
    body untouched; field decoding happens in the fetcher.
    """

    def fetch_batch(self, codes: list[str]) -> Any:
        """
        Fetch raw quote records for all codes in one request.

        Raises QuoteFetchError on transport failure or a non-JSON body.
        """
        ...
