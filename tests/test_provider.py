"""Tests for BrottsplatskartanProvider with mocked HTTP."""

import requests

from sources.crime.providers.base import FailureReason, FetchResult


class TestGetEvents:
    def test_returns_raw_events(self, provider, session, mock_response, sample_event):
        data = [sample_event(), sample_event(id=2)]
        session.get.return_value = mock_response(json_data={"data": data})
        result = provider.get_events("helsingborg", 5)
        assert result.ok
        assert result.events == data
        assert result.events[0]["headline"] == "Cykel stulen vid stationen"

    def test_correct_url_and_params(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": []})
        provider.get_events("malmo", 5)
        args, kwargs = session.get.call_args
        assert args[0] == "https://brottsplatskartan.se/api/events/"
        assert kwargs["params"] == {"location": "malmo", "limit": 5}

    def test_city_passed_unencoded_to_params(self, provider, session, mock_response):
        """Encoding is left to requests, never concatenated into the URL."""
        session.get.return_value = mock_response(json_data={"data": []})
        provider.get_events("malmo&limit=500", 5)
        args, kwargs = session.get.call_args
        assert "?" not in args[0]
        assert kwargs["params"]["location"] == "malmo&limit=500"
        assert kwargs["params"]["limit"] == 5

    def test_empty_data(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": []})
        result = provider.get_events("malmo", 5)
        assert result.ok
        assert result.events == []

    def test_missing_fields_stay_absent(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": [{"id": 3}]})
        result = provider.get_events("malmo", 5)
        assert result.events == [{"id": 3}]

    def test_extra_fields_kept(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": [{"id": 3, "lat": 55.6}]})
        result = provider.get_events("malmo", 5)
        assert result.events == [{"id": 3, "lat": 55.6}]

    def test_values_not_coerced(self, provider, session, mock_response):
        data = [{"id": "7", "headline": "A"}, {"id": 1.0}, {"id": 2, "location": 12}]
        session.get.return_value = mock_response(json_data={"data": data})
        result = provider.get_events("malmo", 5)
        assert result.ok
        assert result.events[0]["id"] == "7"
        assert isinstance(result.events[1]["id"], float)
        assert result.events[2]["location"] == 12


class TestFailures:
    def test_timeout(self, provider, session):
        session.get.side_effect = requests.Timeout("read timed out")
        result = provider.get_events("malmo", 5)
        assert not result.ok
        assert result.failure == FailureReason.TIMEOUT
        assert "timed out" in result.detail

    def test_connection_error(self, provider, session):
        session.get.side_effect = requests.ConnectionError("refused")
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.NETWORK

    def test_non_2xx_status(self, provider, session, mock_response):
        session.get.return_value = mock_response(status_code=503)
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.HTTP_STATUS
        assert "503" in result.detail

    def test_invalid_json(self, provider, session, mock_response):
        resp = mock_response()
        resp.json.side_effect = ValueError("Expecting value")
        session.get.return_value = resp
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.DECODE

    def test_missing_data_key(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"events": []})
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.DECODE

    def test_data_not_a_list(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": {"id": 1}})
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.DECODE

    def test_body_not_an_object(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data=[{"id": 1}])
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.DECODE

    def test_non_object_event(self, provider, session, mock_response):
        session.get.return_value = mock_response(json_data={"data": [{"id": 1}, "not-an-event"]})
        result = provider.get_events("malmo", 5)
        assert result.failure == FailureReason.DECODE
        assert result.events is None


class TestFetchResult:
    def test_success_is_ok(self):
        assert FetchResult.success([]).ok

    def test_failed_is_not_ok(self):
        result = FetchResult.failed(FailureReason.NETWORK, "boom")
        assert not result.ok
        assert result.detail == "boom"


def test_close_closes_session(provider, session):
    provider.close()
    session.close.assert_called_once()
