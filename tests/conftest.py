"""Pytest fixtures shared across the sheet, chart and server tests."""

from __future__ import annotations

import pytest

SAMPLE_CSV = (
    "Year,Value added in the agricultural sector as percent of GDP,Notes\r\n"
    '1961,"12.50","first, estimate"\r\n'
    "1962,11.25,\r\n"
    "\r\n"
    "2010,1.80,\r\n"
    '2011,1.60,"said ""ok"""\r\n'
    "2012,,missing\r\n"
    "2015,2.10,\r\n"
    "2024,2.40,\r\n"
    "2025,2.55,\r\n"
)


class FakeResponse:
    """Stand-in for `requests.Response` with the attributes the server reads."""

    def __init__(self, text: str = "", status_code: int = 200, reason: str = "OK") -> None:
        self.text = text
        self.status_code = status_code
        self.reason = reason
        self.encoding = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


@pytest.fixture
def sample_csv() -> str:
    """Return a small sheet export with quoted fields, gaps and blank lines."""

    return SAMPLE_CSV


@pytest.fixture
def flask_app():
    """Return the Flask application in testing mode."""

    import app as server

    server.app.config.update(TESTING=True)
    return server.app


@pytest.fixture
def client(flask_app):
    """Return a Flask test client."""

    return flask_app.test_client()


@pytest.fixture
def sheet_response(monkeypatch):
    """Patch `requests.get` in the server to return a canned response.

    Call the fixture with the response (or exception) to serve; the list of
    requested URLs is returned for assertions.
    """

    import app as server

    calls: list[dict] = []

    def install(result):
        def fake_get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(server.requests, "get", fake_get)
        return calls

    return install
