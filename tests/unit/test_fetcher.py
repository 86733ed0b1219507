import requests

import pytest

from tests.helpers.site_imports import FetchError, HttpFetcher


def _response(status_code: int, body: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    return response


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def test_fetch_returns_body_for_ok_status():
    session = FakeSession(response=_response(200, b"<a href='https://example.com/a'>a</a>"))
    fetcher = HttpFetcher(timeout=3, session=session)

    result = fetcher.fetch("https://example.com")

    assert result.ok is True
    assert "https://example.com/a" in result.text
    assert session.calls == [("https://example.com", 3)]


def test_fetch_drops_body_for_non_ok_status():
    session = FakeSession(response=_response(404, b"not found"))
    fetcher = HttpFetcher(session=session)

    result = fetcher.fetch("https://example.com/missing")

    assert result.ok is False
    assert result.status_code == 404
    assert result.text == ""


def test_fetch_wraps_transport_errors():
    session = FakeSession(error=requests.ConnectionError("refused"))
    fetcher = HttpFetcher(session=session)

    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch("https://example.com")

    assert excinfo.value.url == "https://example.com"
    assert "refused" in excinfo.value.reason


def test_user_agent_and_close():
    session = FakeSession()

    with HttpFetcher(user_agent="site-mapper/test", session=session) as fetcher:
        assert fetcher.session.headers["User-Agent"] == "site-mapper/test"

    assert session.closed is True
