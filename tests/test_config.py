"""Tests for configuration module."""

import importlib

import task_service.config as config_module


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)

    config = importlib.reload(config_module)

    assert config.Config.SQLALCHEMY_DATABASE_URI.startswith("postgresql+psycopg://")
    assert config.Config.HOST == "127.0.0.1"
    assert config.Config.PORT == 8080
    assert config.Config.SQLALCHEMY_ENGINE_OPTIONS["pool_pre_ping"] is True


def test_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tasks.db")
    monkeypatch.setenv("PORT", "9000")

    config = importlib.reload(config_module)

    assert config.Config.SQLALCHEMY_DATABASE_URI == "sqlite:///tasks.db"
    assert config.Config.PORT == 9000

    monkeypatch.undo()
    importlib.reload(config_module)


def test_test_config_uses_in_memory_sqlite():
    assert config_module.TestConfig.TESTING is True
    assert config_module.TestConfig.SQLALCHEMY_DATABASE_URI == "sqlite://"


def test_telemetry_and_logging_settings(monkeypatch):
    monkeypatch.setenv("OTEL_SERVICE_NAME", "tasks-prod")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4318")
    monkeypatch.setenv("LOG_LEVEL", "info")

    config = importlib.reload(config_module)

    assert config.Config.SERVICE_NAME == "tasks-prod"
    assert config.Config.OTLP_ENDPOINT == "http://collector:4318"
    assert config.Config.LOG_LEVEL == "INFO"

    monkeypatch.undo()
    importlib.reload(config_module)
