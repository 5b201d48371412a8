from __future__ import annotations
import logging
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings
from .filters import InvalidFilterFormat
from .routes import router as responses_router
from .upstream import FilloutClient, UpstreamError, build_http_client
from .validation import InvalidQueryParameters

log = logging.getLogger("fillout.app")

UPSTREAM_ERROR_MESSAGE = "Error while calling Fillout API"
INVALID_QUERY_MESSAGE = "Invalid Query Parameters"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def create_app(settings: Settings, client: Optional[httpx.Client] = None) -> FastAPI:
    """
    Build the service. `client` lets callers supply the httpx.Client used
    for Fillout calls; by default one is built from `settings`.
    """
    app = FastAPI(title="Fillout Filtered Responses", version="1.0.0")
    app.state.settings = settings
    app.state.fillout = FilloutClient(
        client if client is not None else build_http_client(settings)
    )

    app.include_router(responses_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _invalid_query(request: Request, exc: RequestValidationError):
        log.warning("Invalid query for %s: %s", request.url.path, exc.errors())
        return _message(404, INVALID_QUERY_MESSAGE)

    @app.exception_handler(InvalidQueryParameters)
    async def _invalid_filters_param(request: Request, exc: InvalidQueryParameters):
        return _message(404, INVALID_QUERY_MESSAGE)

    @app.exception_handler(InvalidFilterFormat)
    async def _invalid_filter(request: Request, exc: InvalidFilterFormat):
        log.info("Filter rejected for %s: %s", request.url.path, exc.message)
        return _message(400, exc.message)

    @app.exception_handler(UpstreamError)
    async def _upstream_failed(request: Request, exc: UpstreamError):
        return _message(400, UPSTREAM_ERROR_MESSAGE)

    @app.on_event("shutdown")
    def _shutdown():
        app.state.fillout.close()

    @app.get("/healthz")
    def health():
        return {
            "ok": True,
            "upstream": settings.fillout_base_url,
            "defaultFormId": settings.default_form_id,
        }

    return app
