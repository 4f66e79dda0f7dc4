"""Periodic message worker."""

import asyncio
import contextlib
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, TextIO

import structlog

from timetracker.utils.metrics import metrics

logger = structlog.get_logger(__name__)

DEFAULT_INTERVAL_SECONDS = 5.0


@dataclass(frozen=True)
class WorkerState:
    """State owned by a worker. Never changes after construction."""

    message: str


def utc_timestamp() -> str:
    """Current UTC wall-clock time as ``YYYY-MM-DDTHH:MM:SS.ffffff``."""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat(timespec="microseconds")


class TimeTracker:
    """Worker holding a message and printing the time on a fixed interval.

    The timestamp loop runs on its own asyncio task, so ``message()`` can be
    answered from any other task (or an HTTP request) without waiting for
    the loop to wake up.
    """

    def __init__(
        self,
        name: str,
        message: str,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        output: Optional[TextIO] = None,
    ):
        """
        Initialize worker.

        Args:
            name: Worker name, used for logs and metrics
            message: Initialization message returned by queries
            interval_seconds: Delay between timestamp lines
            output: Stream for timestamp lines (stdout when omitted)
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.name = name
        self.interval_seconds = interval_seconds
        self.output = output
        self._state = WorkerState(message=message)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        """Whether the timestamp loop task is alive."""
        return self._task is not None and not self._task.done()

    def message(self) -> str:
        """Return the initialization message, unchanged."""
        logger.debug("Message queried", worker=self.name)
        metrics.queries_total.labels(worker=self.name).inc()
        return self._state.message

    def done(self) -> None:
        """Acknowledge a done notification. The loop keeps running."""
        logger.info("Done notification received", worker=self.name)
        metrics.done_total.labels(worker=self.name).inc()

    async def run(self) -> None:
        """Print the current UTC time every interval, forever."""
        logger.info(
            "Timestamp loop started",
            worker=self.name,
            interval_seconds=self.interval_seconds,
        )
        while True:
            await asyncio.sleep(self.interval_seconds)
            self._emit(utc_timestamp())

    def start(self) -> asyncio.Task:
        """
        Launch the timestamp loop on a background task.

        Returns:
            The loop task (the existing one if already running)
        """
        if self.running:
            return self._task

        self._task = asyncio.get_running_loop().create_task(
            self.run(), name=f"timetracker:{self.name}"
        )
        self._task.add_done_callback(self._on_loop_exit)
        metrics.worker_active.labels(worker=self.name).set(1)
        return self._task

    async def shutdown(self) -> None:
        """Cancel the timestamp loop if it is running."""
        if not self.running:
            return

        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task

    def _emit(self, line: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()
        metrics.ticks_total.labels(worker=self.name).inc()

    def _on_loop_exit(self, task: asyncio.Task) -> None:
        metrics.worker_active.labels(worker=self.name).set(0)

        if task.cancelled():
            logger.info("Timestamp loop cancelled", worker=self.name)
            return

        exc = task.exception()
        if exc is not None:
            logger.error(
                "Timestamp loop crashed",
                worker=self.name,
                error=str(exc),
                exc_info=exc,
            )
