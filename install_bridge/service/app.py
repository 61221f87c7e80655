"""FastAPI application serving install badges and platform redirects."""

from __future__ import annotations

import base64
import binascii
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..badge import generate_badge
from ..config import parse_config
from ..detect import detect_os
from ..logging import get_logger
from ..resolver import get_install_target
from .pages import render_fallback_page, render_index_page

MAX_CONFIG_SIZE = 8 * 1024

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}

logger = get_logger("service")


class RequestConfigError(ValueError):
    """Raised when the ``config`` query parameter cannot be turned into a config."""


class HealthResponse(BaseModel):
    status: str


@dataclass
class ServiceSettings:
    """Runtime settings for the HTTP service."""

    host: str = "0.0.0.0"
    port: int = 3000
    max_config_size: int = MAX_CONFIG_SIZE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("HOST") or defaults.host,
            port=_as_int(env.get("PORT"), defaults.port),
            max_config_size=_as_int(env.get("MAX_CONFIG_SIZE"), defaults.max_config_size),
        )


def _as_int(value: Optional[str], default: int) -> int:
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def decode_config_param(param: Optional[str], *, max_size: int = MAX_CONFIG_SIZE) -> str:
    """Decode a base64 (standard or URL-safe) ``config`` parameter to JSON text."""
    if not param:
        raise RequestConfigError("Missing config parameter")

    # Query-string decoding turns "+" into spaces.
    normalized = param.strip().replace(" ", "+").replace("-", "+").replace("_", "/").rstrip("=")
    normalized += "=" * (-len(normalized) % 4)
    try:
        raw = base64.b64decode(normalized, validate=True)
    except (binascii.Error, ValueError):
        raise RequestConfigError("Invalid config encoding") from None

    if len(raw) > max_size:
        raise RequestConfigError("Config too large")
    return raw.decode("utf-8", errors="replace")


def _config_from_param(param: Optional[str], settings: ServiceSettings) -> Dict[str, Any]:
    text = decode_config_param(param, max_size=settings.max_config_size)
    result = parse_config(text)
    if not result.success:
        raise RequestConfigError(f"Invalid config: {', '.join(result.errors or [])}")
    return result.config or {}


def create_app(settings: Optional[ServiceSettings] = None) -> FastAPI:
    """Create the FastAPI application exposing badge and install endpoints."""
    settings = settings or ServiceSettings.from_env()
    app = FastAPI(title="Install Bridge", version=__version__)
    app.state.settings = settings

    @app.middleware("http")
    async def add_default_headers(request: Request, call_next: Any) -> Response:
        if request.method == "OPTIONS":
            response: Response = Response(status_code=204)
        else:
            response = await call_next(request)
        for header, value in _SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(render_index_page())

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/badge.svg")
    async def badge(config: Optional[str] = None) -> Response:
        data = _config_from_param(config, settings)
        return Response(
            content=generate_badge(data),
            media_type="image/svg+xml; charset=utf-8",
            headers={"Cache-Control": "public, max-age=3600"},
        )

    @app.get("/install")
    async def install(request: Request, config: Optional[str] = None) -> Response:
        data = _config_from_param(config, settings)
        detected = detect_os(request.headers.get("user-agent", ""))
        target = get_install_target(data, detected)

        if target.available and target.url:
            logger.debug("Redirecting %s to installer %s", detected, target.url)
            return RedirectResponse(target.url, status_code=302)
        if target.fallback:
            logger.debug("No %s installer for %s; redirecting to %s", detected, data.get("name"), target.fallback)
            return RedirectResponse(target.fallback, status_code=302)

        return HTMLResponse(render_fallback_page(data, detected))

    @app.exception_handler(RequestConfigError)
    async def config_error_handler(_: Any, exc: RequestConfigError) -> PlainTextResponse:
        logger.info("Rejected config request: %s", exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(_: Any, exc: StarletteHTTPException) -> PlainTextResponse:
        if exc.status_code == 404:
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    return app


def run_service(settings: Optional[ServiceSettings] = None) -> None:  # pragma: no cover - integration path
    import uvicorn

    settings = settings or ServiceSettings.from_env()
    logger.info("Install Bridge server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


__all__ = [
    "MAX_CONFIG_SIZE",
    "RequestConfigError",
    "ServiceSettings",
    "create_app",
    "decode_config_param",
    "run_service",
]
