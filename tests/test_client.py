import types

import pytest
import requests

from src.timetable.client import OrchestrationApiClient
from src.timetable.config import TimetableConfig
from src.timetable.errors import (
    ApiError,
    AuthenticationError,
    DataIntegrityError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)


def _response(status_code=200, body=None, json_error=False):
    def _json():
        if json_error:
            raise ValueError("not json")
        return body

    return types.SimpleNamespace(status_code=status_code, json=_json)


class FakeSession:
    """Stands in for requests.Session, replaying queued responses or errors."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _client(session, **kwargs):
    kwargs.setdefault("retry_wait_seconds", 0)
    return OrchestrationApiClient(
        "http://orchestration.test/", token="token-123", session=session, **kwargs
    )


def test_get_session_schedule_requests_schedule_endpoint(schedule_payload):
    session = FakeSession(_response(body=[schedule_payload(), schedule_payload(closed_tables=5)]))

    schedules = _client(session, timeout_seconds=5).get_session_schedule("HEI", "2025-05-05")

    assert len(schedules) == 2
    assert schedules[1].capacity.closed == 5
    (call,) = session.calls
    assert call["url"] == "http://orchestration.test/visit-sessions/schedule"
    assert call["params"] == {"prisonId": "HEI", "date": "2025-05-05"}
    assert call["headers"]["Authorization"] == "Bearer token-123"
    assert call["timeout"] == 5


def test_no_authorization_header_without_token():
    session = FakeSession(_response(body=[]))
    client = OrchestrationApiClient("http://orchestration.test", session=session)

    assert client.get_session_schedule("HEI", "2025-05-05") == []
    assert "Authorization" not in session.calls[0]["headers"]


def test_transient_failure_is_retried(schedule_payload):
    session = FakeSession(
        requests.ConnectionError("refused"),
        _response(status_code=503),
        _response(body=[schedule_payload()]),
    )

    schedules = _client(session, retry_attempts=3).get_session_schedule("HEI", "2025-05-05")

    assert len(schedules) == 1
    assert len(session.calls) == 3


def test_network_error_raised_after_retries_exhausted():
    session = FakeSession(
        requests.Timeout("slow"),
        requests.Timeout("slow"),
        requests.Timeout("slow"),
    )

    with pytest.raises(NetworkError):
        _client(session, retry_attempts=3).get_session_schedule("HEI", "2025-05-05")

    assert len(session.calls) == 3


def test_rate_limit_is_a_retried_network_error():
    session = FakeSession(_response(status_code=429), _response(status_code=429))

    with pytest.raises(RateLimitError) as exc_info:
        _client(session, retry_attempts=2).get_session_schedule("HEI", "2025-05-05")

    assert isinstance(exc_info.value, NetworkError)
    assert len(session.calls) == 2


@pytest.mark.parametrize(
    "status_code, error",
    [
        (404, NotFoundError),
        (401, AuthenticationError),
        (403, AuthenticationError),
        (400, ApiError),
    ],
)
def test_permanent_failures_are_not_retried(status_code, error):
    session = FakeSession(_response(status_code=status_code))

    with pytest.raises(error):
        _client(session, retry_attempts=3).get_session_schedule("XYZ", "2025-05-05")

    assert len(session.calls) == 1


def test_api_error_keeps_status_code():
    session = FakeSession(_response(status_code=422))

    with pytest.raises(ApiError) as exc_info:
        _client(session).get_session_schedule("HEI", "2025-05-05")

    assert exc_info.value.status_code == 422


def test_invalid_json_is_a_data_integrity_error():
    session = FakeSession(_response(json_error=True))

    with pytest.raises(DataIntegrityError):
        _client(session).get_session_schedule("HEI", "2025-05-05")


def test_negative_capacity_is_a_data_integrity_error(schedule_payload):
    raw = schedule_payload()
    raw["capacity"]["open"] = -1
    session = FakeSession(_response(body=[raw]))

    with pytest.raises(DataIntegrityError):
        _client(session).get_session_schedule("HEI", "2025-05-05")

    assert len(session.calls) == 1


def test_from_config():
    config = TimetableConfig(
        orchestration_api_url="http://api.test/",
        orchestration_api_token="abc",
        api_timeout_seconds=3,
        api_retry_attempts=5,
    )

    client = OrchestrationApiClient.from_config(config)

    assert client.base_url == "http://api.test"
    assert client.token == "abc"
    assert client.timeout_seconds == 3
    assert client.retry_attempts == 5
