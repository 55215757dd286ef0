"""Error handlers with OpenTelemetry trace context."""

import logging

from flask import Flask, jsonify
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from task_service.extensions import db


logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> tuple:
    """Create error response with trace context.

    Use this function in routes instead of returning jsonify directly.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    response = {"error": message}

    trace_id = _current_trace_id()
    if trace_id:
        response["trace_id"] = trace_id

    return jsonify(response), status_code


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(400)
    def bad_request(error):
        return _make_error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return _make_error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _make_error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        return _make_error_response("Internal server error", 500)

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        logger.exception("Database error while handling request")
        return _make_error_response("Internal server error", 500)


def _make_error_response(message: str, status_code: int) -> tuple:
    """Create error response with status and trace context."""
    response = {
        "error": message,
        "status": status_code,
    }

    # Add trace ID for debugging
    trace_id = _current_trace_id()
    if trace_id:
        response["trace_id"] = trace_id

    return jsonify(response), status_code


def _current_trace_id() -> str | None:
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        return format(span_context.trace_id, "032x")
    return None
