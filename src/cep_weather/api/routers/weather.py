"""
cep_weather.api.routers.weather

Weather service `/weather` endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cep_weather.api.deps import weather_lookup_service, zipcode_from_request
from cep_weather.services.weather_lookup import WeatherLookupService

router = APIRouter()


@router.post("/weather")
async def weather(
    cep: str = Depends(zipcode_from_request),
    service: WeatherLookupService = Depends(weather_lookup_service),
) -> JSONResponse:
    result = await service.lookup(cep)
    return JSONResponse(result.to_wire())
