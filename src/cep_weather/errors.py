"""
cep_weather.errors

Request-scoped error taxonomy shared by both services.

Responsibilities:
- Give every terminal request condition one status code and one message.
- Keep HTTP rendering in a single exception handler (see `cep_weather.api.base`).
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

SEARCH_ERROR_PREFIX = "error while searching for "


class PipelineError(Exception):
    """
    Base for failures that end a request with a plain-text HTTP response.
    Startup failures never derive from this class.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "internal error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MethodNotAllowed(PipelineError):
    status_code = HTTP_405_METHOD_NOT_ALLOWED
    message = "method not allowed"


class InvalidJson(PipelineError):
    status_code = HTTP_400_BAD_REQUEST
    message = "invalid json"


class InvalidZipcode(PipelineError):
    # Starlette renamed this constant (UNPROCESSABLE_CONTENT) and deprecated the old one.
    status_code = 422
    message = "invalid zipcode"


class ZipcodeNotFound(PipelineError):
    status_code = HTTP_404_NOT_FOUND
    message = "can not find zipcode"


class CityLookupFailed(PipelineError):
    message = SEARCH_ERROR_PREFIX + "city"


class WeatherLookupFailed(PipelineError):
    # The only message that carries the underlying error detail.
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{SEARCH_ERROR_PREFIX}weather: {detail}")


class UpstreamUnavailable(PipelineError):
    message = SEARCH_ERROR_PREFIX + "weather"


# --- Module Notes -----------------------------------------------------------
# Provider clients raise these directly so the pipeline never inspects provider
# payloads; routers let them propagate to the app-level handler.
