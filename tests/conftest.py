"""Pytest fixtures for task service testing.

Each ``app`` gets its own in-memory SQLite engine, already holding the
``tasks`` table, so tests never share rows.
"""

import os

import pytest


# Telemetry stays off; spans and meters fall back to no-ops
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    from task_service import create_app
    from task_service.config import TestConfig

    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    """Database handle with an app context pushed for the whole test."""
    from task_service.extensions import db as _db

    with app.app_context():
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def task(db):
    """A task already stored in the database."""
    from task_service.services import insert_new_task

    return insert_new_task(db.session, "Test task", False)
