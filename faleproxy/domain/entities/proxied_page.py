"""Entidade que representa uma página obtida e reescrita pelo proxy."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ProxiedPage:
    """Resultado de uma página remota após a substituição de palavras."""

    #: Documento HTML serializado já com o texto visível reescrito.
    content: str
    #: Título reescrito da página; vazio quando o documento não possui título.
    title: str
    #: Endereço informado pelo cliente para obter a página.
    original_url: str

    def to_payload(self) -> Dict[str, Any]:
        """Serializa a página no formato consumido pelo cliente web."""

        return {
            "success": True,
            "content": self.content,
            "title": self.title,
            "originalUrl": self.original_url,
        }
