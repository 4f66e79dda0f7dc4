"""
TimeTracker - periodic message worker

A background timestamp loop with a query interface that stays responsive,
callable in-process or from a separate client node.
"""

import sys

import structlog

__version__ = "0.1.0"
__author__ = "TimeTracker Team"
__all__ = ["api", "client", "config", "worker", "utils"]

# Library use without setup_logging(): stdout carries timestamp lines only
if not structlog.is_configured():
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
