"""Errors raised while fetching and rewriting pages."""
from __future__ import annotations


class ProxyError(Exception):
    """Base error for failures while proxying a page."""


class FetchError(ProxyError):
    """Raised when the remote page cannot be downloaded."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class InvalidURLError(FetchError):
    """Raised when the informed address is not an absolute HTTP(S) URL."""


class MissingURLError(ProxyError, ValueError):
    """Raised when no URL is informed."""

    def __init__(self, message: str = "URL is required") -> None:
        super().__init__(message)


__all__ = ["FetchError", "InvalidURLError", "MissingURLError", "ProxyError"]
