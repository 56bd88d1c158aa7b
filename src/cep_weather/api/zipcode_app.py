"""
cep_weather.api.zipcode_app

FastAPI app factory for the zipcode service (front).

Responsibilities:
- Build the traced HTTP client used to reach the weather service.
- Expose validation + relay on `POST /weather`.
"""

from __future__ import annotations

import httpx
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from cep_weather.api.base import create_base_app
from cep_weather.api.routers.zipcode import router as zipcode_router
from cep_weather.clients.weather_service import WeatherServiceClient
from cep_weather.observability.http import build_http_client
from cep_weather.services.forwarding import ForwardingService
from cep_weather.settings import Settings


def create_zipcode_app(
    *,
    settings: Settings,
    tracer_provider: TracerProvider,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    tracer = tracer_provider.get_tracer(settings.service_name)
    http = build_http_client(tracer=tracer, transport=transport)

    app = create_base_app(
        title="Zipcode Service",
        settings=settings,
        tracer_provider=tracer_provider,
        tracer=tracer,
        http=http,
    )
    app.state.forwarding = ForwardingService(
        tracer=tracer,
        span_prefix=settings.request_name,
        upstream=WeatherServiceClient(http=http, url=settings.weather_service_url),
    )
    app.include_router(zipcode_router, tags=["weather"])
    return app
