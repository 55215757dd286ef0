"""Flask application factory for the task service."""

import logging
import os

from flask import Flask

from task_service.converters import TaskUidConverter
from task_service.extensions import db, ma


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Telemetry is skipped entirely when OTEL_SDK_DISABLED is set.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application with its tables created.
    """
    if config_class is None:
        from task_service.config import Config

        config_class = Config

    telemetry_enabled = not os.getenv("OTEL_SDK_DISABLED")
    if telemetry_enabled:
        from task_service.telemetry import instrument_flask_app, setup_telemetry

        # Providers must exist before the app is instrumented
        setup_telemetry(config_class)

    app = Flask(__name__)
    app.config.from_object(config_class)

    if telemetry_enabled:
        instrument_flask_app(app)

    # Converters must be known before any rule that uses them is added
    app.url_map.converters["task_uid"] = TaskUidConverter

    # The engine pool is built from SQLALCHEMY_DATABASE_URI here
    db.init_app(app)
    ma.init_app(app)

    from task_service.errors import register_error_handlers
    from task_service.middleware import register_request_middleware
    from task_service.routes import health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)
    register_error_handlers(app)
    register_request_middleware(app, record_metrics=telemetry_enabled)

    if telemetry_enabled:
        from task_service.telemetry import attach_log_handler

        attach_log_handler()

    _configure_logging(app.config["LOG_LEVEL"])

    with app.app_context():
        db.create_all()

    return app


def _configure_logging(level: str) -> None:
    app_logger = logging.getLogger("task_service")
    app_logger.setLevel(level)
    app_logger.propagate = True

    # werkzeug duplicates the access log line
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
