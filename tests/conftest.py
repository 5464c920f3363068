"""Shared fixtures for the test suite."""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app
from sources.crime.providers.brottsplatskartan_provider import BrottsplatskartanProvider


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(status_code=200, json_data=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.ok = 200 <= status_code < 300
        resp.json.return_value = json_data if json_data is not None else {}
        return resp
    return _make


@pytest.fixture
def sample_event():
    """Factory fixture — call with overrides to get an upstream event dict."""
    def _make(**overrides):
        event = {
            "id": 1,
            "title": "Stöld, Helsingborg",
            "location": "Helsingborg",
            "headline": "Cykel stulen vid stationen",
            "description": "En cykel stals under natten.",
            "published": "2025-01-15T10:00:00+01:00",
            "image": "https://brottsplatskartan.se/img/1.jpg",
            "link": "https://brottsplatskartan.se/1",
        }
        event.update(overrides)
        return event
    return _make


@pytest.fixture
def session():
    """Mocked RequestSession."""
    return MagicMock()


@pytest.fixture
def provider(session):
    """BrottsplatskartanProvider backed by the mocked session."""
    return BrottsplatskartanProvider(session=session)


@pytest.fixture
def client(provider):
    """TestClient for an app wired to the mocked upstream session."""
    return TestClient(create_app(Settings(), provider=provider))
