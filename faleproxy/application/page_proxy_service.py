"""Serviço que obtém uma página remota e reescreve seu texto visível."""
from __future__ import annotations

import logging
from typing import Callable

from faleproxy.domain import MissingURLError, PageFetcher, ProxiedPage, ProxyError
from faleproxy.infrastructure.html_rewriter import RewrittenDocument, rewrite_html

HtmlRewriter = Callable[[str], RewrittenDocument]


class PageProxyService:
    """Coordena o download e a reescrita das páginas solicitadas."""

    def __init__(
        self, fetcher: PageFetcher, rewriter: HtmlRewriter = rewrite_html
    ) -> None:
        """Inicializa o serviço com as dependências configuradas.

        Args:
            fetcher: Implementação de ``PageFetcher`` usada para baixar o HTML.
            rewriter: Função que recebe o HTML bruto e devolve o documento
                reescrito com seu título.
        """

        self._fetcher = fetcher
        self._rewriter = rewriter
        self._log = logging.getLogger("faleproxy.proxy")

    def proxy(self, url: str | None) -> ProxiedPage:
        """Baixa ``url`` e devolve a página com o texto visível reescrito.

        Args:
            url: Endereço absoluto HTTP(S) informado pelo cliente.

        Returns:
            ``ProxiedPage`` com o HTML reescrito, o título e a URL original.

        Raises:
            MissingURLError: Quando ``url`` está ausente ou em branco.
            FetchError: Quando a página não pode ser obtida.
            ProxyError: Quando o HTML obtido não pode ser processado.
        """

        if url is None or not str(url).strip():
            raise MissingURLError()
        url = str(url).strip()

        page = self._fetcher.fetch(url)
        self._log.debug("%s: %d caracteres recebidos", url, len(page.html))
        try:
            document = self._rewriter(page.html)
        except Exception as exc:
            self._log.error("falha ao processar %s: %s", url, exc)
            raise ProxyError(str(exc)) from exc

        self._log.info("%s reescrita (título: %r)", url, document.title)
        return ProxiedPage(
            content=document.content,
            title=document.title,
            original_url=url,
        )


__all__ = ["HtmlRewriter", "PageProxyService"]
