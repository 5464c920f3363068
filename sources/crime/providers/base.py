"""
Base provider interface for crime data sources.

Providers never raise on upstream failure: they return a FetchResult
carrying either the raw upstream events or a typed failure reason.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class FailureReason(str, Enum):
    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


@dataclass
class FetchResult:
    """Outcome of one upstream call."""
    events: Optional[List[Dict[str, Any]]] = None
    failure: Optional[FailureReason] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, events: List[Dict[str, Any]]) -> "FetchResult":
        return cls(events=events)

    @classmethod
    def failed(cls, reason: FailureReason, detail: str = "") -> "FetchResult":
        return cls(failure=reason, detail=detail)


class CrimeDataProvider(ABC):
    """Abstract base class for crime data providers."""

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def get_events(self, location: str, limit: int) -> FetchResult:
        """
        Fetch recent crime events for a location.

        Args:
            location: Location name as understood by the provider (e.g. 'malmo')
            limit: Max events to return

        Returns:
            FetchResult with the list of raw event dicts on success
        """
        pass

    def close(self):
        """Release any held resources."""
        pass
