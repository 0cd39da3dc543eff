"""Serviços de aplicação do Faleproxy."""
from .page_proxy_service import HtmlRewriter, PageProxyService

__all__ = ["HtmlRewriter", "PageProxyService"]
