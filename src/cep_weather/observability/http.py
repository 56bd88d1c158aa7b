"""
cep_weather.observability.http

Traced HTTP client used for every outbound call.

Responsibilities:
- Open a CLIENT span around each request.
- Inject the current trace context into request headers.
- Log the requested URL without its query string (it may carry API keys).
"""

from __future__ import annotations

import httpx
from opentelemetry import propagate
from opentelemetry.trace import SpanKind, Status, StatusCode, Tracer

from cep_weather.observability.logging import get_logger

log = get_logger(__name__)


def _redacted(url: httpx.URL) -> str:
    return str(url.copy_with(query=None))


class TracingTransport(httpx.AsyncBaseTransport):
    """
    Wraps another transport so callers get propagation without touching headers.
    """

    def __init__(self, *, tracer: Tracer, inner: httpx.AsyncBaseTransport | None = None) -> None:
        self._tracer = tracer
        self._inner = inner or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        url = _redacted(request.url)
        with self._tracer.start_as_current_span(
            f"HTTP {request.method}", kind=SpanKind.CLIENT
        ) as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.full", url)

            # Injected while the client span is current: the callee's parent is this span.
            propagate.inject(request.headers)
            log.info("requesting_url", url=url, method=request.method)

            response = await self._inner.handle_async_request(request)

            span.set_attribute("http.response.status_code", response.status_code)
            if response.status_code >= 400:
                span.set_status(Status(StatusCode.ERROR))
            return response

    async def aclose(self) -> None:
        await self._inner.aclose()


def build_http_client(
    *, tracer: Tracer, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    # `transport` is the real wire (or a test double); tracing always wraps it.
    return httpx.AsyncClient(transport=TracingTransport(tracer=tracer, inner=transport))
