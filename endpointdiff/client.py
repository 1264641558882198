"""HTTP client that fetches JSON documents for comparison."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_TIMEOUT_SECONDS
from .exceptions import FetchError

logger = logging.getLogger(__name__)


class JSONClient:
    """
    Fetches and decodes JSON documents over HTTP GET.

    Only a 200 response is accepted; any other status, a transport failure
    or a body that is not valid JSON raises FetchError.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None
    ):
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_json(self, url: str, headers: Optional[dict[str, str]] = None) -> Any:
        """
        GET `url` and decode the response body.

        Args:
            url: Endpoint URL
            headers: Request headers

        Returns:
            The decoded JSON document

        Raises:
            FetchError: request failed, non-200 status, or invalid JSON
        """
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, headers=headers or {}, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, f"HTTP request error: {e}") from e

        if response.status_code != requests.codes.ok:
            raise FetchError(
                url,
                f"HTTP error: {response.status_code} {response.reason}",
                status_code=response.status_code
            )

        logger.debug(
            "Response status: %s, size: %d bytes",
            response.status_code,
            len(response.content)
        )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                url,
                f"JSON parse error: {e}",
                status_code=response.status_code
            ) from e

    def close(self):
        self.session.close()
