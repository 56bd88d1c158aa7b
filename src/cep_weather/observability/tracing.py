"""
cep_weather.observability.tracing

OpenTelemetry tracer provider setup.

Responsibilities:
- Build a tracer provider that samples every request and batches spans to an
  OTLP collector over gRPC.
- Refuse to start when the collector cannot be reached.
- Flush buffered spans on shutdown.
"""

from __future__ import annotations

import grpc
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

from cep_weather.observability.logging import get_logger
from cep_weather.settings import Settings

log = get_logger(__name__)


class ExporterInitError(RuntimeError):
    """
    The trace pipeline could not be established at startup.
    Fatal: the process must exit instead of serving untraced traffic.
    """


def configure_tracing(settings: Settings) -> TracerProvider:
    """Create, register and return the process-wide tracer provider.

    Raises:
        ExporterInitError: the collector did not accept a gRPC connection within
            `settings.otel_exporter_connect_timeout` seconds.
    """
    endpoint = settings.otel_exporter_otlp_endpoint
    wait_for_collector(endpoint, timeout=settings.otel_exporter_connect_timeout)

    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: settings.service_name}),
        sampler=ALWAYS_ON,
    )
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
    )
    trace.set_tracer_provider(provider)
    # The traces endpoint is the collector's own downstream (Zipkin); it is not exported to here.
    log.info(
        "tracing_initialized",
        endpoint=endpoint,
        service=settings.service_name,
        traces_endpoint=settings.otel_exporter_otlp_traces_endpoint,
    )
    return provider


def wait_for_collector(endpoint: str, *, timeout: float) -> None:
    # gRPC targets carry no scheme; accept `http://host:port` from env files anyway.
    target = endpoint.split("://", 1)[-1]
    channel = grpc.insecure_channel(target)
    try:
        grpc.channel_ready_future(channel).result(timeout=timeout)
    except grpc.FutureTimeoutError as e:
        raise ExporterInitError(
            f"failed to create gRPC connection to collector at {target}"
        ) from e
    finally:
        channel.close()


def shutdown_tracing(provider: TracerProvider) -> None:
    # Batch processors export whatever is still buffered before returning.
    provider.force_flush()
    provider.shutdown()
