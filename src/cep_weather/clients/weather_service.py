"""
cep_weather.clients.weather_service

Client used by the zipcode service to call the weather service.

Responsibilities:
- POST the validated CEP as JSON.
- Hand back the raw upstream response so it can be relayed untouched.
"""

from __future__ import annotations

import httpx

from cep_weather.errors import UpstreamUnavailable


class WeatherServiceClient:
    def __init__(self, *, http: httpx.AsyncClient, url: str) -> None:
        self._http = http
        self._url = url

    async def weather_for(self, cep: str) -> httpx.Response:
        # Any status (including 4xx/5xx) is a valid answer; only transport failures are errors.
        try:
            return await self._http.post(self._url, json={"cep": cep})
        except httpx.HTTPError as e:
            raise UpstreamUnavailable() from e
