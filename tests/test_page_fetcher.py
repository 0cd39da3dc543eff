"""Testes do cliente HTTP que obtém as páginas remotas."""
from __future__ import annotations

from typing import Dict

import pytest
import requests

from faleproxy.domain import FetchError, InvalidURLError
from faleproxy.infrastructure.fetcher import DEFAULT_USER_AGENT, RequestsPageFetcher


class _DummyResponse:
    def __init__(
        self,
        url: str,
        text: str,
        status_code: int = 200,
        headers: Dict[str, str] | None = None,
        encoding: str | None = "utf-8",
        apparent_encoding: str | None = "utf-8",
    ) -> None:
        self.url = url
        self.text = text
        self.status_code = status_code
        self.headers = headers if headers is not None else {
            "Content-Type": "text/html; charset=utf-8"
        }
        self.encoding = encoding
        self.apparent_encoding = apparent_encoding

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(
                f"{self.status_code} Client Error for url: {self.url}"
            )


class _DummySession:
    def __init__(self, responses: Dict[str, _DummyResponse | Exception]) -> None:
        self._responses = responses
        self.calls: list[dict] = []

    def get(self, url: str, headers: dict | None = None, timeout: float | None = None):
        self.calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        if url not in self._responses:
            raise AssertionError(f"URL inesperada requisitada: {url}")
        outcome = self._responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_fetch_returns_page_html() -> None:
    session = _DummySession(
        {"https://example.com/": _DummyResponse("https://example.com/", "<p>Yale</p>")}
    )
    fetcher = RequestsPageFetcher(session=session, timeout=3)

    page = fetcher.fetch("https://example.com/")

    assert page.html == "<p>Yale</p>"
    assert page.url == "https://example.com/"
    assert page.status_code == 200
    assert session.calls[0]["timeout"] == 3
    assert session.calls[0]["headers"]["User-Agent"] == DEFAULT_USER_AGENT


def test_fetch_reports_final_url_after_redirect() -> None:
    session = _DummySession(
        {
            "http://example.com": _DummyResponse(
                "https://www.example.com/", "<p>ok</p>"
            )
        }
    )

    page = RequestsPageFetcher(session=session).fetch("http://example.com")

    assert page.url == "https://www.example.com/"


def test_fetch_sends_custom_user_agent_and_headers() -> None:
    session = _DummySession(
        {"https://example.com/": _DummyResponse("https://example.com/", "")}
    )
    fetcher = RequestsPageFetcher(
        session=session,
        user_agent="faleproxy-tests",
        headers={"Accept-Language": "pt-BR", "X-Empty": ""},
    )

    fetcher.fetch("https://example.com/")

    headers = session.calls[0]["headers"]
    assert headers["User-Agent"] == "faleproxy-tests"
    assert headers["Accept-Language"] == "pt-BR"
    assert "X-Empty" not in headers


@pytest.mark.parametrize(
    "url", ["not-a-valid-url", "ftp://example.com/file", "https://", "/relative/path"]
)
def test_fetch_rejects_invalid_urls_without_requesting(url: str) -> None:
    session = _DummySession({})

    with pytest.raises(InvalidURLError) as excinfo:
        RequestsPageFetcher(session=session).fetch(url)

    assert excinfo.value.url == url
    assert session.calls == []


def test_fetch_raises_fetch_error_on_http_error_status() -> None:
    session = _DummySession(
        {
            "https://example.com/missing": _DummyResponse(
                "https://example.com/missing", "not found", status_code=404
            )
        }
    )

    with pytest.raises(FetchError) as excinfo:
        RequestsPageFetcher(session=session).fetch("https://example.com/missing")

    assert "404" in str(excinfo.value)
    assert excinfo.value.url == "https://example.com/missing"


def test_fetch_wraps_connection_errors() -> None:
    session = _DummySession(
        {"https://unreachable.test/": requests.ConnectionError("connection refused")}
    )

    with pytest.raises(FetchError) as excinfo:
        RequestsPageFetcher(session=session).fetch("https://unreachable.test/")

    assert "connection refused" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_fetch_uses_detected_encoding_when_charset_is_missing() -> None:
    response = _DummyResponse(
        "https://example.com/",
        "<p>ok</p>",
        headers={"Content-Type": "text/html"},
        encoding="ISO-8859-1",
        apparent_encoding="utf-8",
    )
    session = _DummySession({"https://example.com/": response})

    RequestsPageFetcher(session=session).fetch("https://example.com/")

    assert response.encoding == "utf-8"


def test_fetch_keeps_declared_charset() -> None:
    response = _DummyResponse(
        "https://example.com/",
        "<p>ok</p>",
        headers={"Content-Type": "text/html; charset=windows-1252"},
        encoding="windows-1252",
        apparent_encoding="utf-8",
    )
    session = _DummySession({"https://example.com/": response})

    RequestsPageFetcher(session=session).fetch("https://example.com/")

    assert response.encoding == "windows-1252"
