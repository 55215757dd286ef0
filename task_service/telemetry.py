"""OpenTelemetry wiring for the task service.

Traces, metrics and logs are exported over OTLP/HTTP to the collector at
``Config.OTLP_ENDPOINT``, tagged with ``SERVICE_NAME`` and ``SERVICE_VERSION``.
None of this runs when OTEL_SDK_DISABLED is set; the tracer and meter
helpers then hand out the API's no-op implementations.
"""

import logging

from opentelemetry import _logs, metrics, trace
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource, get_aggregated_resources
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor


HEALTH_PATH = "/api/health"
METRIC_EXPORT_INTERVAL_MS = 60000

_log_handler: LoggingHandler | None = None


def setup_telemetry(config: type) -> None:
    """Install tracer, meter and logger providers for this process.

    Safe to call more than once; only the first call has any effect.

    Args:
        config: Configuration class providing SERVICE_NAME, SERVICE_VERSION
            and OTLP_ENDPOINT.
    """
    global _log_handler

    if _log_handler is not None:
        return

    endpoint = config.OTLP_ENDPOINT.rstrip("/")
    resource = get_aggregated_resources(
        detectors=[],
        initial_resource=Resource.create(
            {
                "service.name": config.SERVICE_NAME,
                "service.version": config.SERVICE_VERSION,
            }
        ),
    )

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )
    trace.set_tracer_provider(tracer_provider)

    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=f"{endpoint}/v1/metrics"),
        export_interval_millis=METRIC_EXPORT_INTERVAL_MS,
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))

    logger_provider = LoggerProvider(resource=resource)
    logger_provider.add_log_record_processor(
        BatchLogRecordProcessor(OTLPLogExporter(endpoint=f"{endpoint}/v1/logs"))
    )
    _logs.set_logger_provider(logger_provider)

    # Every engine the pool creates gets query spans
    SQLAlchemyInstrumentor().instrument()
    LoggingInstrumentor().instrument(set_logging_format=True)

    _log_handler = LoggingHandler(level=logging.DEBUG, logger_provider=logger_provider)


def attach_log_handler() -> None:
    """Ship records from the root logger to the OTLP log exporter."""
    if _log_handler is None:
        return

    root_logger = logging.getLogger()
    if _log_handler not in root_logger.handlers:
        root_logger.addHandler(_log_handler)


def instrument_flask_app(app) -> None:
    """Add request spans to a Flask app, skipping the health check.

    Called per app rather than globally so that forked WSGI workers
    are covered.
    """
    FlaskInstrumentor().instrument_app(app, excluded_urls=HEALTH_PATH)


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


def get_meter(name: str) -> metrics.Meter:
    return metrics.get_meter(name)
