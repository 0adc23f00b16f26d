# users_api/shared/telemetry.py
"""
Tracing is opt-in: nothing is exported unless OTEL_EXPORTER_OTLP_ENDPOINT
is set. Use cases always open spans; without a provider they are no-ops.
"""
import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from users_api.shared.config import settings

logger = structlog.get_logger()


def telemetry_enabled() -> bool:
    return bool(settings.OTEL_EXPORTER_OTLP_ENDPOINT)


def build_tracer_provider(service_name: str, endpoint: str) -> TracerProvider:
    provider = TracerProvider(resource=Resource.create({
        "service.name": service_name,
        "service.version": settings.APP_VERSION,
        "deployment.environment": settings.APP_ENV.value,
    }))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")))
    return provider


def setup_telemetry(service_name: str = settings.OTEL_SERVICE_NAME) -> bool:
    """Installs the global tracer provider. Returns False when tracing is off."""
    if not telemetry_enabled():
        logger.info("telemetry_disabled")
        return False

    trace.set_tracer_provider(build_tracer_provider(service_name, settings.OTEL_EXPORTER_OTLP_ENDPOINT))
    logger.info("telemetry_enabled", service=service_name, endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    return True


def instrument_fastapi(app):
    if telemetry_enabled():
        FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    return trace.get_tracer(name)
