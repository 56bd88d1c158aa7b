"""
cep_weather.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Turn the raw inbound body into a CEP string. Routing has already rejected
  non-POST methods, so the body is only read for POST.
- Encapsulate app.state access patterns (services built by the app factories).
"""

from __future__ import annotations

from fastapi import Request
from pydantic import ValidationError

from cep_weather.errors import InvalidJson
from cep_weather.models import ZipCodeRequest
from cep_weather.services.forwarding import ForwardingService
from cep_weather.services.weather_lookup import WeatherLookupService


async def zipcode_from_request(request: Request) -> str:
    body = await request.body()
    try:
        return ZipCodeRequest.model_validate_json(body).cep
    except ValidationError as e:
        raise InvalidJson() from e


def weather_lookup_service(request: Request) -> WeatherLookupService:
    # Built once in `cep_weather.api.weather_app.create_weather_app`.
    return request.app.state.weather_lookup  # type: ignore[attr-defined]


def forwarding_service(request: Request) -> ForwardingService:
    return request.app.state.forwarding  # type: ignore[attr-defined]
