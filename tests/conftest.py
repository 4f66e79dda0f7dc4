"""Test configuration and fixtures."""

import io
from collections.abc import AsyncGenerator

import pytest

from timetracker.utils.logging import setup_logging
from timetracker.worker.registry import WorkerRegistry
from timetracker.worker.worker import TimeTracker


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Route structlog through stdlib logging so caplog sees it."""
    setup_logging()


@pytest.fixture
def output() -> io.StringIO:
    """Capture timestamp lines."""
    return io.StringIO()


@pytest.fixture
async def worker(output) -> AsyncGenerator[TimeTracker]:
    """Create a fast-ticking worker, stopped after the test."""
    tracker = TimeTracker("test-worker", "Hello World", interval_seconds=0.05, output=output)
    yield tracker
    await tracker.shutdown()


@pytest.fixture
def registry() -> WorkerRegistry:
    """Create an empty registry."""
    return WorkerRegistry()
