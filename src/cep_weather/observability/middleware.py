"""
cep_weather.observability.middleware

HTTP middleware that opens the root span of every inbound request.

Responsibilities:
- Continue the caller's trace from W3C `traceparent` headers when present.
- Name the root span after the configured request label.
- Bind request metadata into structlog contextvars.
"""

from __future__ import annotations

import structlog
from opentelemetry import propagate
from opentelemetry.trace import SpanKind, Status, StatusCode, Tracer
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

UNTRACED_PATHS = frozenset({"/healthz"})


class TracingMiddleware(BaseHTTPMiddleware):
    """
    - One SERVER span per request, parented on the inbound trace context
    - Span stays current while the route runs, so step spans nest under it
    """

    def __init__(self, app: ASGIApp, *, tracer: Tracer, span_name: str) -> None:
        super().__init__(app)
        self._tracer = tracer
        self._span_name = span_name

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in UNTRACED_PATHS:
            return await call_next(request)

        parent = propagate.extract(request.headers)
        with self._tracer.start_as_current_span(
            self._span_name, context=parent, kind=SpanKind.SERVER
        ) as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.path", request.url.path)

            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(path=request.url.path, method=request.method)
            try:
                response: Response = await call_next(request)
            finally:
                # Avoid leaking context across requests under async concurrency.
                structlog.contextvars.clear_contextvars()

            span.set_attribute("http.response.status_code", response.status_code)
            if response.status_code >= 500:
                span.set_status(Status(StatusCode.ERROR))
            return response


# --- Module Notes -----------------------------------------------------------
# Outbound propagation is the mirror image of this class, see
# `observability.http.TracingTransport`.
