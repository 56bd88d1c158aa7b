"""
cep_weather.api.routers.zipcode

Zipcode service `/weather` endpoint: validate and relay.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from cep_weather.api.deps import forwarding_service, zipcode_from_request
from cep_weather.services.forwarding import ForwardingService

router = APIRouter()


@router.post("/weather")
async def weather(
    cep: str = Depends(zipcode_from_request),
    service: ForwardingService = Depends(forwarding_service),
) -> Response:
    upstream = await service.forward(cep)
    # Relayed as-is: the weather service owns status and body for this CEP.
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type", "application/json"),
    )
