"""Porta responsável por obter páginas remotas."""
from __future__ import annotations

from abc import ABC, abstractmethod

from faleproxy.domain.entities import FetchedPage


class PageFetcher(ABC):
    """Define como a aplicação baixa o HTML de uma URL."""

    @abstractmethod
    def fetch(self, url: str) -> FetchedPage:
        """Baixar a página e devolver seu HTML.

        Raises:
            FetchError: Quando a página não pode ser obtida.
        """
