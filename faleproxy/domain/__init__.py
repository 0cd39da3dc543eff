"""API pública do domínio do Faleproxy.

O módulo centraliza entidades, portas, erros e a substituição de palavras
para que possam ser importados diretamente de ``faleproxy.domain``.
"""

from .entities import FetchedPage, ProxiedPage
from .errors import FetchError, InvalidURLError, MissingURLError, ProxyError
from .ports import PageFetcher
from .replacement import DEFAULT_REPLACER, WordReplacer, replace

__all__ = [
    "DEFAULT_REPLACER",
    "FetchError",
    "FetchedPage",
    "InvalidURLError",
    "MissingURLError",
    "PageFetcher",
    "ProxiedPage",
    "ProxyError",
    "WordReplacer",
    "replace",
]
