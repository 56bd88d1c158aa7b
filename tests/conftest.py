"""
tests.conftest

Shared fixtures: settings, in-memory span capture and fake external providers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cep_weather.api.weather_app import create_weather_app
from cep_weather.settings import Settings

VIACEP_HOST = "viacep.test"
WEATHER_API_HOST = "weatherapi.test"


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def weather_settings() -> Settings:
    return Settings(
        service_name="goapp-weather",
        request_name="goapp-weather-request",
        viacep_base_url=f"https://{VIACEP_HOST}",
        weather_api_url=f"https://{WEATHER_API_HOST}/v1/current.json",
        weather_api_key="test-key",
    )


@pytest.fixture
def zipcode_settings() -> Settings:
    return Settings(
        service_name="goapp-zipcode",
        request_name="goapp-zipcode-request",
        weather_service_url="http://weather.test/weather",
    )


@dataclass
class FakeProviders:
    """
    ViaCEP + WeatherAPI double. Unknown codes answer with ViaCEP's `erro` marker.
    """

    cities: dict[str, str] = field(
        default_factory=lambda: {"29902555": "Linhares", "72547240": "Brasília"}
    )
    temperatures: dict[str, float] = field(
        default_factory=lambda: {"Linhares": 28.3, "Brasília": 21.0}
    )
    requests: list[httpx.Request] = field(default_factory=list)
    viacep_override: Callable[[httpx.Request], httpx.Response] | None = None
    weather_override: Callable[[httpx.Request], httpx.Response] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == VIACEP_HOST:
            if self.viacep_override is not None:
                return self.viacep_override(request)
            cep = request.url.path.split("/")[2]
            if cep in self.cities:
                return httpx.Response(200, json={"cep": cep, "localidade": self.cities[cep]})
            return httpx.Response(200, json={"erro": "true"})
        if request.url.host == WEATHER_API_HOST:
            if self.weather_override is not None:
                return self.weather_override(request)
            city = request.url.params["q"]
            payload: dict[str, Any] = {"current": {"temp_c": self.temperatures[city]}}
            return httpx.Response(200, json=payload)
        raise AssertionError(f"unexpected request to {request.url}")

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def providers() -> FakeProviders:
    return FakeProviders()


@pytest.fixture
def weather_app(weather_settings: Settings, tracer_provider: TracerProvider, providers: FakeProviders):
    return create_weather_app(
        settings=weather_settings,
        tracer_provider=tracer_provider,
        transport=providers.transport(),
    )


@pytest.fixture
def asgi_client() -> Callable[..., httpx.AsyncClient]:
    # httpx ASGITransport does not run lifespan; apps are usable without it.
    def _make(app) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

    return _make
