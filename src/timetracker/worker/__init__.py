"""Worker components."""

from timetracker.worker.registry import WorkerRegistry
from timetracker.worker.worker import TimeTracker, WorkerState

__all__ = ["TimeTracker", "WorkerRegistry", "WorkerState"]
