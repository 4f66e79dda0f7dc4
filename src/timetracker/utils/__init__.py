"""Utility functions and helpers."""

from timetracker.utils.logging import setup_logging
from timetracker.utils.metrics import metrics

__all__ = ["setup_logging", "metrics"]
