"""Registry of named workers."""

from typing import Dict, List, Literal, Optional

import structlog

from timetracker.exceptions import AlreadyStartedError, WorkerNotFoundError
from timetracker.worker.worker import DEFAULT_INTERVAL_SECONDS, TimeTracker

logger = structlog.get_logger(__name__)

ConflictPolicy = Literal["reject", "return_existing"]


class WorkerRegistry:
    """Maps worker names to live workers.

    Passed explicitly to whoever needs to address workers by name; there is
    no process-wide registration.
    """

    def __init__(self, on_conflict: ConflictPolicy = "reject"):
        """
        Initialize registry.

        Args:
            on_conflict: ``reject`` raises ``AlreadyStartedError`` on a name
                collision, ``return_existing`` hands back the live worker
        """
        if on_conflict not in ("reject", "return_existing"):
            raise ValueError(f"Unknown conflict policy: {on_conflict}")

        self.on_conflict = on_conflict
        self._workers: Dict[str, TimeTracker] = {}

    def start_worker(
        self,
        name: str,
        message: str,
        interval_seconds: Optional[float] = None,
    ) -> TimeTracker:
        """
        Create and register a worker.

        Args:
            name: Worker name
            message: Initialization message
            interval_seconds: Delay between timestamp lines

        Returns:
            The new worker, or the existing one under ``return_existing``

        Raises:
            AlreadyStartedError: If the name is taken and the policy is ``reject``
        """
        existing = self._workers.get(name)
        if existing is not None:
            if self.on_conflict == "reject":
                logger.warning("Worker name already in use", worker=name)
                raise AlreadyStartedError(name, existing)

            logger.warning("Worker already started, returning existing instance", worker=name)
            return existing

        if interval_seconds is None:
            interval_seconds = DEFAULT_INTERVAL_SECONDS

        worker = TimeTracker(name, message, interval_seconds=interval_seconds)
        self._workers[name] = worker
        logger.info("Worker started", worker=name)
        return worker

    def get(self, name: str) -> TimeTracker:
        """
        Look up a worker by name.

        Raises:
            WorkerNotFoundError: If no worker has that name
        """
        try:
            return self._workers[name]
        except KeyError:
            raise WorkerNotFoundError(name) from None

    def names(self) -> List[str]:
        return sorted(self._workers)

    def __contains__(self, name: str) -> bool:
        return name in self._workers

    def __len__(self) -> int:
        return len(self._workers)

    async def shutdown_all(self) -> None:
        """Cancel every running timestamp loop."""
        for worker in self._workers.values():
            await worker.shutdown()
        logger.info("All workers shut down", count=len(self._workers))
