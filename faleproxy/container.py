"""Dependency container for the proxy service."""
from __future__ import annotations

from dataclasses import dataclass

from faleproxy.application import PageProxyService
from faleproxy.domain import PageFetcher
from faleproxy.infrastructure import RequestsPageFetcher
from faleproxy.settings import ProxyConfig


@dataclass
class ProxyContainer:
    """Container exposing the proxy service dependencies."""

    config: ProxyConfig
    fetcher: PageFetcher
    proxy_service: PageProxyService


def build_container(
    config: ProxyConfig | None = None,
    *,
    fetcher: PageFetcher | None = None,
) -> ProxyContainer:
    """Build the proxy container from ``config``."""

    config = config or ProxyConfig.from_env()
    fetcher = fetcher or RequestsPageFetcher(
        timeout=config.request_timeout,
        user_agent=config.user_agent,
    )
    proxy_service = PageProxyService(fetcher)

    return ProxyContainer(
        config=config,
        fetcher=fetcher,
        proxy_service=proxy_service,
    )


__all__ = ["ProxyContainer", "build_container"]
