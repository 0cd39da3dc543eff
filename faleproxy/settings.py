"""Configurações do proxy carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from faleproxy.infrastructure.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 3001
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_STATIC_ROOT = Path(__file__).resolve().parent / "public"


@dataclass(frozen=True)
class ProxyConfig:
    """Configuration passed explicitly to the server at startup."""

    #: Interface em que o Uvicorn escuta conexões.
    host: str = _DEFAULT_HOST
    #: Porta HTTP exposta pelo servidor.
    port: int = _DEFAULT_PORT
    #: Diretório com ``index.html`` e os demais arquivos do cliente web.
    static_root: Path = _DEFAULT_STATIC_ROOT
    #: Tempo máximo, em segundos, para baixar uma página remota.
    request_timeout: float = DEFAULT_TIMEOUT
    #: Cabeçalho ``User-Agent`` enviado aos sites remotos.
    user_agent: str = DEFAULT_USER_AGENT
    #: Nível de log aplicado pela linha de comando.
    log_level: str = _DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """Build a configuration instance from environment variables."""

        load_dotenv()
        return cls(
            host=os.getenv("FALEPROXY_HOST", _DEFAULT_HOST),
            port=_int_env("FALEPROXY_PORT", os.getenv("PORT", str(_DEFAULT_PORT))),
            static_root=Path(
                os.getenv("FALEPROXY_STATIC_ROOT", str(_DEFAULT_STATIC_ROOT))
            ),
            request_timeout=_float_env("FALEPROXY_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT)),
            user_agent=os.getenv("FALEPROXY_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("FALEPROXY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(self, **overrides: object) -> "ProxyConfig":
        """Return a copy replacing the fields whose override is not ``None``."""

        values = {key: value for key, value in overrides.items() if value is not None}
        if "static_root" in values:
            values["static_root"] = Path(values["static_root"])
        return replace(self, **values)

    @property
    def public_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}"


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer in environment variable {name!r}: {raw}") from exc


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid number in environment variable {name!r}: {raw}") from exc


__all__ = ["ProxyConfig"]
