"""
cep_weather.services.weather_lookup

Weather service pipeline: CEP -> city -> temperature -> result.

Responsibilities:
- Run the dependent steps strictly in order; a failed step ends the request.
- Open one child span per step under the request's root span.
- Tag the root span with the composed weather description.
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.trace import Tracer

from cep_weather.clients.viacep import ViaCepClient
from cep_weather.clients.weatherapi import WeatherApiClient
from cep_weather.models import WeatherResult
from cep_weather.observability.logging import get_logger
from cep_weather.zipcode import ensure_valid_zipcode

log = get_logger(__name__)


class WeatherLookupService:
    def __init__(
        self,
        *,
        tracer: Tracer,
        span_prefix: str,
        zipcodes: ViaCepClient,
        weather: WeatherApiClient,
    ) -> None:
        self._tracer = tracer
        self._span_prefix = span_prefix
        self._zipcodes = zipcodes
        self._weather = weather

    async def lookup(self, cep: str) -> WeatherResult:
        """
        Raises the `cep_weather.errors` variant of whichever step failed:
        InvalidZipcode, ZipcodeNotFound, CityLookupFailed or WeatherLookupFailed.
        """
        # Root span: the one opened by the tracing middleware for this request.
        root = trace.get_current_span()
        root.set_attribute("cep", cep)

        ensure_valid_zipcode(cep)
        city = await self._resolve_city(cep)
        temp_c = await self._resolve_weather(city)

        result = WeatherResult.from_celsius(city=city, temp_c=temp_c)
        root.set_attribute("weather", result.describe())
        log.info("weather_resolved", cep=cep, city=city, temp_c=temp_c)
        return result

    async def _resolve_city(self, cep: str) -> str:
        with self._tracer.start_as_current_span(f"{self._span_prefix} - searchCity") as span:
            span.set_attribute("cep", cep)
            city = await self._zipcodes.find_city(cep)
            span.set_attribute("city", city)
            return city

    async def _resolve_weather(self, city: str) -> float:
        with self._tracer.start_as_current_span(f"{self._span_prefix} - searchWeather") as span:
            span.set_attribute("city", city)
            return await self._weather.current_temp_c(city)


# --- Module Notes -----------------------------------------------------------
# Spans use the SDK defaults for exceptions: the error is recorded on the step span
# and its status set to ERROR before the exception reaches the route.
