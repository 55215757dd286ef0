"""Request timing middleware.

One ``before_request``/``after_request`` pair times each request. The
measured duration feeds the access log line and, when telemetry is
enabled, the HTTP request counter and duration histogram.
"""

import logging
import time
from typing import NamedTuple

from flask import Flask, Response, g, request
from opentelemetry.metrics import Counter, Histogram

from task_service.telemetry import HEALTH_PATH, get_meter


logger = logging.getLogger(__name__)


class HttpInstruments(NamedTuple):
    requests_total: Counter
    request_duration: Histogram


def register_request_middleware(app: Flask, record_metrics: bool = False) -> None:
    """Time every request, log it, and optionally record HTTP metrics.

    Args:
        app: Flask application instance.
        record_metrics: Also record OTel request metrics. Health checks are
            logged but never counted.
    """
    instruments = _create_instruments() if record_metrics else None

    @app.before_request
    def start_timer() -> None:
        g.request_start_time = time.perf_counter()

    @app.after_request
    def finish_request(response: Response) -> Response:
        start_time = getattr(g, "request_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0.0

        logger.info(
            f"{request.remote_addr} \"{request.method} {request.path}\" "
            f"{response.status_code} {duration_ms:.2f}ms"
        )

        if instruments is not None and request.path != HEALTH_PATH:
            _record(instruments, response.status_code, duration_ms)

        return response


def _create_instruments() -> HttpInstruments:
    meter = get_meter(__name__)
    return HttpInstruments(
        requests_total=meter.create_counter(
            name="http_requests_total",
            description="Total HTTP requests",
            unit="1",
        ),
        request_duration=meter.create_histogram(
            name="http_request_duration_ms",
            description="HTTP request duration in milliseconds",
            unit="ms",
        ),
    )


def _record(instruments: HttpInstruments, status_code: int, duration_ms: float) -> None:
    # Route pattern keeps task ids out of metric attributes
    route = request.url_rule.rule if request.url_rule else request.path
    attributes = {
        "method": request.method,
        "route": route,
        "status": str(status_code),
    }

    instruments.requests_total.add(1, attributes)
    instruments.request_duration.record(duration_ms, attributes)
