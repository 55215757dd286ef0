"""Tests for error responses."""

from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from task_service.errors import error_response


TRACE_ID = 0x4BF92F3577B34DA6A3CE929D0E0E4736
SPAN_ID = 0x00F067AA0BA902B7


def _active_span():
    context = SpanContext(
        trace_id=TRACE_ID,
        span_id=SPAN_ID,
        is_remote=False,
        trace_flags=TraceFlags(TraceFlags.SAMPLED),
    )
    return trace.use_span(NonRecordingSpan(context))


def test_error_response_without_span(app):
    with app.test_request_context():
        response, status = error_response("Something broke", 418)

    assert status == 418
    assert response.get_json() == {"error": "Something broke"}


def test_error_response_includes_trace_id(app):
    with app.test_request_context(), _active_span():
        response, _ = error_response("Traced", 500)

    assert response.get_json()["trace_id"] == "4bf92f3577b34da6a3ce929d0e0e4736"


def test_unknown_route_returns_json(client, db):
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found", "status": 404}


def test_handler_error_includes_trace_id(client, db):
    with _active_span():
        response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["trace_id"] == format(TRACE_ID, "032x")
