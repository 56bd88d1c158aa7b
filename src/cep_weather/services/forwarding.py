"""
cep_weather.services.forwarding

Zipcode service pipeline: validate locally, then delegate to the weather service.
"""

from __future__ import annotations

import httpx
from opentelemetry import trace
from opentelemetry.trace import Tracer

from cep_weather.clients.weather_service import WeatherServiceClient
from cep_weather.zipcode import ensure_valid_zipcode


class ForwardingService:
    def __init__(self, *, tracer: Tracer, span_prefix: str, upstream: WeatherServiceClient) -> None:
        self._tracer = tracer
        self._span_prefix = span_prefix
        self._upstream = upstream

    async def forward(self, cep: str) -> httpx.Response:
        trace.get_current_span().set_attribute("cep", cep)
        ensure_valid_zipcode(cep)

        with self._tracer.start_as_current_span(f"{self._span_prefix} - searchWeather") as span:
            span.set_attribute("cep", cep)
            response = await self._upstream.weather_for(cep)
            span.set_attribute("http.response.status_code", response.status_code)
            return response
