"""
cep_weather.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings shared by both services.
- Keep the deployment's environment variable names (OTEL_*, HTTP_PORT, ...).
- Hide secrets from repr/logging (weather API key).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Read once at startup and passed explicitly to every component.
    Frozen so no request can mutate process-wide configuration.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Tracing
    service_name: str = Field(default="cep-weather", validation_alias="OTEL_SERVICE_NAME")
    request_name: str = Field(default="cep-weather-request", validation_alias="REQUEST_NAME_OTEL")
    otel_exporter_otlp_endpoint: str = Field(
        default="localhost:4317", validation_alias="OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    # Informational: spans always go to the gRPC collector, which forwards them on.
    otel_exporter_otlp_traces_endpoint: str | None = Field(
        default=None, validation_alias="OTEL_EXPORTER_OTLP_TRACES_ENDPOINT"
    )
    otel_exporter_connect_timeout: float = Field(
        default=1.0, validation_alias="OTEL_EXPORTER_CONNECT_TIMEOUT"
    )

    # HTTP listen address in `host:port` form; an empty host binds every interface.
    http_port: str = Field(default=":8080", validation_alias="HTTP_PORT")

    # Zipcode service -> weather service
    weather_service_url: str = Field(
        default="http://goapp-weather:8181/weather", validation_alias="WEATHER_SERVICE_URL"
    )

    # Weather service -> external providers
    viacep_base_url: str = Field(default="https://viacep.com.br", validation_alias="VIACEP_BASE_URL")
    weather_api_url: str = Field(
        default="http://api.weatherapi.com/v1/current.json", validation_alias="WEATHER_API_URL"
    )
    weather_api_key: str = Field(default="", repr=False, validation_alias="WEATHER_API_KEY")

    def listen_address(self) -> tuple[str, int]:
        host, _, port = self.http_port.rpartition(":")
        return host or "0.0.0.0", int(port)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly with field names; deployments only set
# environment variables, so both paths produce the same frozen snapshot.
