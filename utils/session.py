"""
Shared HTTP session for upstream API calls.

Thin wrapper over requests.Session that applies default headers and a
default timeout to every request. Errors from requests propagate to the
caller, which decides how to classify them.
"""

import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_HEADERS = {
    "User-Agent": "crime-proxy-api/1.0",
    "Accept": "application/json",
}


class RequestSession:
    """requests.Session with default headers and timeout."""

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT, headers: Optional[Dict] = None):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)

    def get(self, url: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """
        Issue a GET request.

        Args:
            url: Absolute URL
            params: Query parameters, encoded by requests
            **kwargs: Passed through to requests.Session.get

        Returns:
            The requests.Response (any status code)

        Raises:
            requests.RequestException: on connection errors and timeouts
        """
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"GET {url} params={params}")
        return self.session.get(url, params=params, **kwargs)

    def close(self):
        """Close the underlying connection pool."""
        self.session.close()
