"""
cep_weather.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- OpenTelemetry tracing: provider setup, server-side context extraction and
  client-side context injection.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Business logic never threads trace context explicitly; it lives in contextvars and
# is moved across HTTP boundaries by `middleware` (inbound) and `http` (outbound).
