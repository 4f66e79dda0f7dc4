"""In-process worker client."""

from timetracker.client.interface import WorkerClient
from timetracker.worker.registry import WorkerRegistry


class LocalWorkerClient(WorkerClient):
    """Calls workers registered in this process."""

    def __init__(self, registry: WorkerRegistry):
        self.registry = registry

    async def message(self, name: str) -> str:
        return self.registry.get(name).message()

    async def done(self, name: str) -> None:
        self.registry.get(name).done()

    async def close(self) -> None:
        pass
