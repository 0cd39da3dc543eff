"""Entidade com o conteúdo bruto de uma página remota."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedPage:
    """HTML bruto devolvido pelo servidor remoto."""

    #: URL final após redirecionamentos.
    url: str
    #: Corpo da resposta decodificado como texto.
    html: str
    #: Código de status HTTP da resposta.
    status_code: int = 200
