"""Interface de linha de comando para operar o Faleproxy."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from faleproxy.api import run
from faleproxy.container import build_container
from faleproxy.domain import ProxyError, replace
from faleproxy.settings import ProxyConfig


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Faleproxy - substitui 'Yale' por 'Fale' em páginas web"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nível de log (DEBUG, INFO, WARNING...). Padrão: FALEPROXY_LOG_LEVEL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Inicia o servidor HTTP do proxy")
    serve.add_argument("--host", default=None, help="Interface de escuta")
    serve.add_argument("--port", type=int, default=None, help="Porta HTTP")
    serve.add_argument(
        "--static-root",
        type=Path,
        default=None,
        help="Diretório com index.html e os arquivos do cliente web",
    )

    replace_cmd = subparsers.add_parser(
        "replace", help="Aplica a substituição a um texto e imprime o resultado"
    )
    replace_cmd.add_argument(
        "text",
        nargs="*",
        help="Texto a converter. Quando omitido, lê da entrada padrão.",
    )

    fetch = subparsers.add_parser(
        "fetch", help="Obtém uma URL e grava o HTML reescrito"
    )
    fetch.add_argument("url", help="Endereço absoluto HTTP(S) da página")
    fetch.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Arquivo de destino do HTML. Padrão: saída padrão",
    )

    return parser.parse_args(argv)


def _configure_logging(console: Console, level_name: str) -> None:
    handler = RichHandler(console=console, markup=False, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = ProxyConfig.from_env()
    if args.log_level:
        config = config.with_overrides(log_level=args.log_level.upper())

    console = Console(stderr=True)
    _configure_logging(console, config.log_level)
    logger = logging.getLogger("faleproxy.cli")

    if args.command == "serve":
        config = config.with_overrides(
            host=args.host, port=args.port, static_root=args.static_root
        )
        run(config)
    elif args.command == "replace":
        text = " ".join(args.text) if args.text else sys.stdin.read()
        sys.stdout.write(replace(text))
        if args.text:
            sys.stdout.write("\n")
    elif args.command == "fetch":
        container = build_container(config)
        try:
            page = container.proxy_service.proxy(args.url)
        except ProxyError as exc:
            logger.error("Falha ao obter %s: %s", args.url, exc)
            return 1
        console.print(f"[bold]Título:[/bold] {escape(page.title or '(sem título)')}")
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(page.content, encoding="utf-8")
            console.print(f"[green]HTML reescrito salvo em {escape(str(args.output))}[/green]")
        else:
            sys.stdout.write(page.content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
