"""
cep_weather.clients.viacep

ViaCEP lookup client.

Responsibilities:
- Resolve a CEP to its city (`localidade`).
- Translate ViaCEP's `erro` marker into `ZipcodeNotFound` and every other
  failure into `CityLookupFailed`.
"""

from __future__ import annotations

from typing import Any

import httpx

from cep_weather.errors import CityLookupFailed, ZipcodeNotFound
from cep_weather.zipcode import normalize_zipcode


class ViaCepClient:
    # ViaCEP answers unknown (but well-formed) codes with 200 and {"erro": true}.
    NOT_FOUND_MARKER = "erro"
    CITY_FIELD = "localidade"

    def __init__(self, *, http: httpx.AsyncClient, base_url: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def find_city(self, cep: str) -> str:
        url = f"{self._base_url}/ws/{normalize_zipcode(cep)}/json/"
        try:
            r = await self._http.get(url)
        except httpx.HTTPError as e:
            raise CityLookupFailed() from e

        if r.status_code != httpx.codes.OK:
            raise CityLookupFailed()

        try:
            payload: Any = r.json()
        except ValueError as e:
            raise CityLookupFailed() from e
        if not isinstance(payload, dict):
            raise CityLookupFailed()

        if payload.get(self.NOT_FOUND_MARKER) is not None:
            raise ZipcodeNotFound()

        city = payload.get(self.CITY_FIELD)
        if not isinstance(city, str) or not city:
            raise CityLookupFailed()
        return city
