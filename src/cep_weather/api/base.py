"""
cep_weather.api.base

Shared FastAPI composition for both services.

Responsibilities:
- Register tracing middleware, the error handler and the health router.
- Own the lifecycle of the outbound HTTP client and the tracer provider.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Tracer
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_405_METHOD_NOT_ALLOWED

from cep_weather import __version__
from cep_weather.api.routers.health import router as health_router
from cep_weather.errors import MethodNotAllowed, PipelineError
from cep_weather.observability.logging import get_logger
from cep_weather.observability.middleware import TracingMiddleware
from cep_weather.observability.tracing import shutdown_tracing
from cep_weather.settings import Settings

log = get_logger(__name__)


def create_base_app(
    *,
    title: str,
    settings: Settings,
    tracer_provider: TracerProvider,
    tracer: Tracer,
    http: httpx.AsyncClient,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", service=settings.service_name, listen=settings.http_port)
        try:
            yield
        finally:
            await http.aclose()
            shutdown_tracing(tracer_provider)
            log.info("shutdown")

    app = FastAPI(title=title, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.http = http

    app.add_middleware(TracingMiddleware, tracer=tracer, span_name=settings.request_name)
    app.add_exception_handler(PipelineError, _pipeline_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.include_router(health_router, tags=["health"])
    return app


async def _pipeline_error_handler(request: Request, exc: PipelineError) -> PlainTextResponse:
    log.info("request_failed", error=type(exc).__name__, status=exc.status_code)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Routing rejects every method but POST; answer in the same plain-text form.
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        return await _pipeline_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)


# --- Module Notes -----------------------------------------------------------
# Nothing here is service specific; `weather_app` and `zipcode_app` attach their
# own router and service object on top of this base.
