"""Adaptadores de infraestrutura (cliente HTTP e reescrita de HTML)."""
from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, RequestsPageFetcher
from .html_rewriter import RewrittenDocument, TextReplacer, rewrite_html

__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "RequestsPageFetcher",
    "RewrittenDocument",
    "TextReplacer",
    "rewrite_html",
]
