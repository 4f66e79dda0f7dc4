"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from timetracker.config.settings import NodeSettings, Settings, WorkerSettings


def test_default_settings():
    """Test default settings values."""
    settings = Settings()

    assert settings.worker.name == "time_tracker"
    assert settings.worker.message == "Hello World"
    assert settings.worker.interval_seconds == 5.0
    assert settings.worker.autostart is True
    assert settings.worker.on_conflict == "reject"
    assert settings.node.role == "server"
    assert settings.node.server_url == "http://localhost:8000"
    assert settings.server.port == 8000
    assert settings.monitoring.log_format == "json"


def test_worker_settings():
    """Test worker settings."""
    worker_settings = WorkerSettings(
        name="clock",
        message="  keep spacing  ",
        interval_seconds=1.5,
        on_conflict="return_existing",
    )

    assert worker_settings.name == "clock"
    assert worker_settings.message == "  keep spacing  "
    assert worker_settings.interval_seconds == 1.5
    assert worker_settings.on_conflict == "return_existing"


@pytest.mark.parametrize("interval", [0, -5])
def test_worker_interval_must_be_positive(interval):
    """Test interval validation."""
    with pytest.raises(ValidationError):
        WorkerSettings(interval_seconds=interval)


def test_node_role_validation():
    """Test that only server and client roles exist."""
    assert NodeSettings(role="client").role == "client"

    with pytest.raises(ValidationError):
        NodeSettings(role="observer")


def test_settings_from_env(monkeypatch):
    """Test settings loaded from environment variables."""
    monkeypatch.setenv("TIMETRACKER_WORKER__MESSAGE", "Hi from env")
    monkeypatch.setenv("TIMETRACKER_WORKER__INTERVAL_SECONDS", "2.5")
    monkeypatch.setenv("TIMETRACKER_NODE__ROLE", "client")
    monkeypatch.setenv("TIMETRACKER_NODE__SERVER_URL", "http://server-node:9000")

    settings = Settings()

    assert settings.worker.message == "Hi from env"
    assert settings.worker.interval_seconds == 2.5
    assert settings.node.role == "client"
    assert settings.node.server_url == "http://server-node:9000"
