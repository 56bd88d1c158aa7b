"""
cep_weather.api.weather_app

FastAPI app factory for the weather service (back).

Responsibilities:
- Build the traced HTTP client used for ViaCEP and WeatherAPI.
- Compose the lookup pipeline and expose it on `POST /weather`.
"""

from __future__ import annotations

import httpx
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from cep_weather.api.base import create_base_app
from cep_weather.api.routers.weather import router as weather_router
from cep_weather.clients.viacep import ViaCepClient
from cep_weather.clients.weatherapi import WeatherApiClient
from cep_weather.observability.http import build_http_client
from cep_weather.services.weather_lookup import WeatherLookupService
from cep_weather.settings import Settings


def create_weather_app(
    *,
    settings: Settings,
    tracer_provider: TracerProvider,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    tracer = tracer_provider.get_tracer(settings.service_name)
    http = build_http_client(tracer=tracer, transport=transport)

    app = create_base_app(
        title="Weather Service",
        settings=settings,
        tracer_provider=tracer_provider,
        tracer=tracer,
        http=http,
    )
    app.state.weather_lookup = WeatherLookupService(
        tracer=tracer,
        span_prefix=settings.request_name,
        zipcodes=ViaCepClient(http=http, base_url=settings.viacep_base_url),
        weather=WeatherApiClient(
            http=http, url=settings.weather_api_url, api_key=settings.weather_api_key
        ),
    )
    app.include_router(weather_router, tags=["weather"])
    return app
