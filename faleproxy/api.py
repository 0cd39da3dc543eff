"""FastAPI application exposing the page proxy and the browser client."""
from __future__ import annotations

import logging

import uvicorn
from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from faleproxy.container import ProxyContainer, build_container
from faleproxy.domain import MissingURLError, ProxyError
from faleproxy.settings import ProxyConfig

_log = logging.getLogger("faleproxy.api")


class FetchRequest(BaseModel):
    """Payload sent by the browser client."""

    #: Absolute address of the page to fetch and rewrite.
    url: str | None = None


class FetchResponse(BaseModel):
    """Rewritten page returned to the browser client."""

    success: bool = True
    content: str
    title: str
    original_url: str = Field(alias="originalUrl")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str


def configure_cors(app: FastAPI) -> None:
    """Apply the default CORS configuration."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def configure_error_handlers(app: FastAPI) -> None:
    """Render HTTP errors as ``{"error": ...}`` like the browser client expects."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"error": describe_validation_error(exc)}
        )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize the first validation error as a single message."""

    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    if location and location[-1] == "url":
        return "URL must be a string"
    field = ".".join(location) or "body"
    return f"Invalid request body: {field}: {first.get('msg', 'invalid value')}"


def include_routes(
    app: FastAPI, container: ProxyContainer, *, prefix: str = ""
) -> None:
    """Register the proxy routes on a FastAPI application."""

    router = APIRouter(prefix=prefix, tags=["Proxy"])
    static_root = container.config.static_root

    @router.get("/", include_in_schema=False)
    def index() -> FileResponse:
        index_path = static_root / "index.html"
        if not index_path.is_file():
            raise HTTPException(status_code=404, detail="index.html not found")
        return FileResponse(index_path)

    @router.post(
        "/fetch",
        response_model=FetchResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def fetch_page(payload: FetchRequest | None = None) -> FetchResponse:
        url = payload.url if payload else None
        try:
            page = container.proxy_service.proxy(url)
        except MissingURLError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        except ProxyError as exc:
            _log.error("Error fetching URL %s: %s", url, exc)
            raise HTTPException(
                status_code=500, detail=f"Failed to fetch content: {exc}"
            )
        return FetchResponse.model_validate(page.to_payload())

    app.include_router(router)
    if static_root.is_dir():
        app.mount("/static", StaticFiles(directory=static_root), name="static")
    else:
        _log.warning("static directory not found: %s", static_root)


def create_app(
    config: ProxyConfig | None = None,
    container: ProxyContainer | None = None,
) -> FastAPI:
    """Create the FastAPI application with the proxy routes configured."""

    container = container or build_container(config)
    app = FastAPI(
        title="Faleproxy",
        version="1.0.0",
        description=(
            "Fetches remote pages and replaces 'Yale' with 'Fale' in their "
            "visible text, leaving URLs and attributes untouched."
        ),
    )
    configure_cors(app)
    configure_error_handlers(app)
    include_routes(app, container)
    return app


def run(config: ProxyConfig | None = None) -> None:
    """Run the proxy using Uvicorn."""

    config = config or ProxyConfig.from_env()
    _log.info("Faleproxy server running at %s", config.public_url)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


__all__ = [
    "ErrorResponse",
    "FetchRequest",
    "FetchResponse",
    "configure_cors",
    "configure_error_handlers",
    "describe_validation_error",
    "create_app",
    "include_routes",
    "run",
]
