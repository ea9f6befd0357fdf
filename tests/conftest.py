"""
Shared test configuration and fixtures.
"""

import logging

import httpx
import pytest

from config.settings import API_KEY_ENV_VAR

TEST_API_KEY = "test_api_key_12345"


class BrokenStream(httpx.SyncByteStream):
    """Response body that drops the connection while being read."""

    def __iter__(self):
        raise httpx.ReadError("Connection reset while reading body")
        yield b""  # pragma: no cover


class MockHTTP:
    """httpx.Client backed by MockTransport that records every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._respond = lambda request: httpx.Response(200, json={})
        self.client = httpx.Client(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    def respond(self, json=None, status_code=200, text=None):
        if text is not None:
            self._respond = lambda request: httpx.Response(status_code, text=text)
        else:
            self._respond = lambda request: httpx.Response(status_code, json=json)

    def fail(self, exc: Exception):
        def raise_error(request):
            raise exc

        self._respond = raise_error

    def break_body(self):
        self._respond = lambda request: httpx.Response(200, stream=BrokenStream())


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def mock_http():
    http = MockHTTP()
    yield http
    http.client.close()


@pytest.fixture
def api_key_env(monkeypatch):
    """Rate API key present in the environment"""
    monkeypatch.setenv(API_KEY_ENV_VAR, TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def no_api_key_env(monkeypatch, tmp_path):
    """No rate API key anywhere, including a stray .env in the working directory"""
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
