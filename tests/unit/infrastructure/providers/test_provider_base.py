"""
Tests for the shared GET helper used by every provider.
"""

import httpx
import pytest

from domain.exceptions.currency import ConfigError, HTTPStatusError, NetworkError, ResponseReadError
from infrastructure.providers.base import ensure_ok, get_response


def test_get_response_returns_fully_read_response(mock_http):
    mock_http.respond(json={"test": "data"})

    response = get_response(mock_http.client, "https://api.example.com/latest", {"q": "1"}, label="test")

    assert response.status_code == 200
    assert response.json() == {"test": "data"}
    assert mock_http.requests[0].url.params["q"] == "1"


def test_get_response_does_not_check_status(mock_http):
    mock_http.respond(text="Service Unavailable", status_code=503)

    response = get_response(mock_http.client, "https://api.example.com/latest", label="test")

    assert response.status_code == 503
    assert response.text == "Service Unavailable"


def test_get_response_requires_client():
    with pytest.raises(ConfigError):
        get_response(None, "https://api.example.com/latest", label="test")


def test_get_response_wraps_transport_errors(mock_http):
    mock_http.fail(httpx.ConnectTimeout("timed out"))

    with pytest.raises(NetworkError) as exc_info:
        get_response(mock_http.client, "https://api.example.com/latest", label="TestProvider")

    assert "TestProvider" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)


def test_get_response_wraps_body_read_errors(mock_http):
    mock_http.break_body()

    with pytest.raises(ResponseReadError) as exc_info:
        get_response(mock_http.client, "https://api.example.com/latest", label="test")

    assert isinstance(exc_info.value.__cause__, httpx.ReadError)


def test_ensure_ok_accepts_200():
    ensure_ok(httpx.Response(200, text="ok"), "test")


@pytest.mark.parametrize("status_code", [201, 204, 301, 404, 429, 500])
def test_ensure_ok_rejects_anything_else(status_code):
    with pytest.raises(HTTPStatusError) as exc_info:
        ensure_ok(httpx.Response(status_code, text="nope"), "test")

    assert exc_info.value.status_code == status_code
    assert exc_info.value.body == "nope"
