"""
tests.test_clients

Provider clients: how each provider response maps onto the error taxonomy.
"""

from __future__ import annotations

import httpx
import pytest

from cep_weather.clients.viacep import ViaCepClient
from cep_weather.clients.weatherapi import WeatherApiClient
from cep_weather.errors import CityLookupFailed, WeatherLookupFailed, ZipcodeNotFound


def _http(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _viacep(handler) -> ViaCepClient:
    return ViaCepClient(http=_http(handler), base_url="https://viacep.test/")


def _weather(handler) -> WeatherApiClient:
    return WeatherApiClient(
        http=_http(handler), url="https://weatherapi.test/v1/current.json", api_key="k"
    )


@pytest.mark.asyncio
async def test_viacep_returns_locality() -> None:
    client = _viacep(lambda r: httpx.Response(200, json={"localidade": "São Paulo", "uf": "SP"}))
    assert await client.find_city("01001-000") == "São Paulo"


@pytest.mark.asyncio
@pytest.mark.parametrize("marker", [True, "true"])
async def test_viacep_error_marker_means_not_found(marker) -> None:
    client = _viacep(lambda r: httpx.Response(200, json={"erro": marker}))
    with pytest.raises(ZipcodeNotFound):
        await client.find_city("72547249")


def _raise_connect(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("refused", request=request)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "handler",
    [
        lambda r: httpx.Response(400, text="Bad Request"),
        lambda r: httpx.Response(200, text="<html>"),
        lambda r: httpx.Response(200, json=["not", "an", "object"]),
        lambda r: httpx.Response(200, json={"cep": "01001-000"}),
        lambda r: httpx.Response(200, json={"localidade": ""}),
        _raise_connect,
    ],
    ids=["status", "not-json", "not-object", "no-locality", "empty-locality", "transport"],
)
async def test_viacep_other_failures(handler) -> None:
    with pytest.raises(CityLookupFailed) as exc_info:
        await _viacep(handler).find_city("01001000")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_weatherapi_reads_current_celsius() -> None:
    client = _weather(lambda r: httpx.Response(200, json={"current": {"temp_c": -3.5}}))
    assert await client.current_temp_c("Curitiba") == -3.5


@pytest.mark.asyncio
async def test_weatherapi_escapes_city() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"current": {"temp_c": 30}})

    await _weather(handler).current_temp_c("São José dos Campos")

    raw_query = seen[0].url.query.decode()
    assert " " not in raw_query
    assert "ã" not in raw_query
    assert seen[0].url.params["q"] == "São José dos Campos"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "handler,detail",
    [
        (lambda r: httpx.Response(403, json={}), "unexpected status 403"),
        (lambda r: httpx.Response(200, text="oops"), "invalid response payload"),
        (lambda r: httpx.Response(200, json={"current": {}}), "invalid response payload"),
        (_raise_connect, "refused"),
    ],
)
async def test_weatherapi_failures(handler, detail) -> None:
    with pytest.raises(WeatherLookupFailed) as exc_info:
        await _weather(handler).current_temp_c("Curitiba")
    assert exc_info.value.detail == detail
    assert exc_info.value.message == f"error while searching for weather: {detail}"
