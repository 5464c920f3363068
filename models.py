"""
Pydantic data models for the crime data proxy.

CrimeEvent mirrors the record shape returned by the Brottsplatskartan
events API. The upstream owns the data: events are relayed as the raw
dicts it sent, and CrimeEvent describes them for the OpenAPI schema and
for typed field projection. Nothing here validates upstream values.
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional


class CrimeEvent(BaseModel):
    """One reported incident from the upstream provider."""
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    title: Optional[str] = None
    location: Optional[str] = None
    headline: Optional[str] = None
    description: Optional[str] = None
    published: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None


def as_event(raw: Dict[str, Any]) -> CrimeEvent:
    """Wrap a raw upstream event without validating or coercing it."""
    return CrimeEvent.model_construct(**raw)


def headlines(events: List[Dict[str, Any]]) -> List[Any]:
    """Project raw events to their headlines, preserving order."""
    return [as_event(event).headline for event in events]


def first_event(events: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the first raw event, or None when there are none."""
    return events[0] if events else None
