"""
Brottsplatskartan crime data provider.

Fetches recent police events for a Swedish location.
https://brottsplatskartan.se/sida/api

No API key required.
"""

import logging
from typing import Optional

import requests

from utils.session import RequestSession

from .base import CrimeDataProvider, FailureReason, FetchResult

logger = logging.getLogger(__name__)

BROTTSPLATSKARTAN_BASE = "https://brottsplatskartan.se/api/events/"


class BrottsplatskartanProvider(CrimeDataProvider):
    """Provider for the Brottsplatskartan events API."""

    def __init__(self, base_url: str = BROTTSPLATSKARTAN_BASE, session: Optional[RequestSession] = None):
        super().__init__()
        self.base_url = base_url
        self.session = session or RequestSession()
        self.name = "brottsplatskartan"

    def get_events(self, location: str, limit: int) -> FetchResult:
        """Fetch events via GET /api/events/?location=...&limit=..."""
        params = {"location": location, "limit": limit}

        try:
            resp = self.session.get(self.base_url, params=params)
        except requests.Timeout as e:
            return self._fail(FailureReason.TIMEOUT, str(e), location)
        except requests.RequestException as e:
            return self._fail(FailureReason.NETWORK, str(e), location)

        if not resp.ok:
            return self._fail(FailureReason.HTTP_STATUS, f"upstream returned {resp.status_code}", location)

        try:
            body = resp.json()
        except ValueError as e:
            return self._fail(FailureReason.DECODE, f"invalid JSON: {e}", location)

        raw = body.get("data") if isinstance(body, dict) else None
        if not isinstance(raw, list):
            return self._fail(FailureReason.DECODE, "response has no 'data' array", location)

        if not all(isinstance(item, dict) for item in raw):
            return self._fail(FailureReason.DECODE, "'data' contains non-object events", location)

        logger.debug(f"{self.name}: {len(raw)} events for {location}")
        return FetchResult.success(raw)

    def _fail(self, reason: FailureReason, detail: str, location: str) -> FetchResult:
        logger.error(f"{self.name}: fetch failed for {location} ({reason.value}): {detail}")
        return FetchResult.failed(reason, detail)

    def close(self):
        self.session.close()
