"""Faleproxy - proxy que troca 'Yale' por 'Fale' no texto das páginas."""
from .application import PageProxyService
from .container import ProxyContainer, build_container
from .domain import ProxiedPage, WordReplacer, replace
from .settings import ProxyConfig

__all__ = [
    "PageProxyService",
    "ProxiedPage",
    "ProxyConfig",
    "ProxyContainer",
    "WordReplacer",
    "build_container",
    "replace",
]
