"""
cep_weather.api.__main__

Entrypoint: `python -m cep_weather.api {zipcode|weather}`.

Responsibilities:
- Load settings and configure logging.
- Establish the trace pipeline, exiting if the collector is unreachable.
- Create the selected app and start uvicorn.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable

import uvicorn
from fastapi import FastAPI

from cep_weather.api.weather_app import create_weather_app
from cep_weather.api.zipcode_app import create_zipcode_app
from cep_weather.observability.logging import configure_logging, get_logger
from cep_weather.observability.tracing import ExporterInitError, configure_tracing
from cep_weather.settings import get_settings

log = get_logger(__name__)

APP_FACTORIES: dict[str, Callable[..., FastAPI]] = {
    "zipcode": create_zipcode_app,
    "weather": create_weather_app,
}


def serve(name: str) -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    try:
        tracer_provider = configure_tracing(settings)
    except ExporterInitError as e:
        log.error("startup_failed", error=str(e))
        raise SystemExit(1) from e

    app = APP_FACTORIES[name](settings=settings, tracer_provider=tracer_provider)
    host, port = settings.listen_address()
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_config=None,  # structlog
    )


def run_zipcode() -> None:
    serve("zipcode")


def run_weather() -> None:
    serve("weather")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="python -m cep_weather.api")
    parser.add_argument("service", choices=sorted(APP_FACTORIES))
    args = parser.parse_args(argv)
    serve(args.service)


if __name__ == "__main__":
    main()
