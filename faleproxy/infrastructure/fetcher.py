"""HTTP client used to download the pages that will be rewritten."""
from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from faleproxy.domain import FetchedPage, FetchError, InvalidURLError, PageFetcher


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 15.0

_DEFAULT_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

_ALLOWED_SCHEMES = ("http", "https")


class RequestsPageFetcher(PageFetcher):
    """Page fetcher implementation based on ``requests``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout
        self._user_agent = user_agent
        self._extra_headers = dict(headers or {})
        self._log = logging.getLogger("faleproxy.fetcher")

    def fetch(self, url: str) -> FetchedPage:
        self._validate_url(url)
        self._log.info("GET %s", url)
        try:
            response = self._session.get(
                url, headers=self._build_headers(), timeout=self._timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            self._log.warning("falha ao obter %s: %s", url, exc)
            raise FetchError(url, str(exc)) from exc

        self._ensure_encoding(response)
        self._log.debug(
            "%s respondeu %s (%s)", url, response.status_code, response.encoding
        )
        return FetchedPage(
            url=response.url or url,
            html=response.text,
            status_code=response.status_code,
        )

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = dict(_DEFAULT_HEADERS)
        headers["User-Agent"] = self._user_agent
        headers.update({k: v for k, v in self._extra_headers.items() if v})
        return headers

    def _validate_url(self, url: str) -> None:
        try:
            parts = urlsplit(url)
        except ValueError as exc:
            raise InvalidURLError(url, f"Invalid URL: {url}") from exc
        if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.netloc:
            raise InvalidURLError(url, f"Invalid URL: {url}")

    def _ensure_encoding(self, response: requests.Response) -> None:
        """Use the detected encoding when the server does not declare a charset.

        ``requests`` falls back to ISO-8859-1 for ``text/*`` responses without
        a charset, which garbles most UTF-8 pages.
        """

        content_type = response.headers.get("Content-Type", "")
        if response.encoding is None or "charset" not in content_type.lower():
            response.encoding = response.apparent_encoding or "utf-8"


__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "RequestsPageFetcher"]
