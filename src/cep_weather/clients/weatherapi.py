"""
cep_weather.clients.weatherapi

WeatherAPI current-conditions client.

Responsibilities:
- Fetch the current Celsius temperature for a city.
- Report any failure as `WeatherLookupFailed` with a short detail string.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ValidationError

from cep_weather.errors import WeatherLookupFailed


class _Current(BaseModel):
    temp_c: float


class CurrentWeatherPayload(BaseModel):
    current: _Current


class WeatherApiClient:
    def __init__(self, *, http: httpx.AsyncClient, url: str, api_key: str) -> None:
        self._http = http
        self._url = url
        self._api_key = api_key

    async def current_temp_c(self, city: str) -> float:
        # httpx URL-escapes the city in the query string.
        params = {"key": self._api_key, "aqi": "no", "q": city}
        try:
            r = await self._http.get(self._url, params=params)
        except httpx.HTTPError as e:
            raise WeatherLookupFailed(str(e) or type(e).__name__) from e

        if r.status_code != httpx.codes.OK:
            raise WeatherLookupFailed(f"unexpected status {r.status_code}")

        try:
            payload = CurrentWeatherPayload.model_validate_json(r.content)
        except ValidationError as e:
            raise WeatherLookupFailed("invalid response payload") from e
        return payload.current.temp_c
