"""Unit tests for logging setup."""

import logging

from timetracker.utils import logging as logging_setup
from timetracker.utils.logging import setup_logging


def test_setup_logging_keeps_foreign_handlers():
    """Test that handlers installed by others survive setup_logging."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)

    try:
        setup_logging()

        assert foreign in root.handlers
        assert logging_setup._handler in root.handlers
    finally:
        root.removeHandler(foreign)


def test_setup_logging_twice_installs_one_handler():
    """Test that repeated setup replaces its own handler."""
    root = logging.getLogger()

    setup_logging()
    first = logging_setup._handler
    setup_logging()
    second = logging_setup._handler

    assert first is not second
    assert first not in root.handlers
    assert second in root.handlers
