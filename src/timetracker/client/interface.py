"""Worker client interface definition."""

from abc import ABC, abstractmethod


class WorkerClient(ABC):
    """
    Abstract interface for reaching a worker.

    Implementations decide whether the worker lives in this process or on a
    server node; callers only see ``message`` and ``done``.
    """

    @abstractmethod
    async def message(self, name: str) -> str:
        """
        Query a worker for its initialization message.

        Args:
            name: Worker name

        Returns:
            The message, unchanged

        Raises:
            WorkerNotFoundError: If no worker has that name
        """
        pass

    @abstractmethod
    async def done(self, name: str) -> None:
        """
        Send a fire-and-forget done notification.

        Args:
            name: Worker name
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release any connection held by the client."""
        pass

    async def __aenter__(self) -> "WorkerClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
