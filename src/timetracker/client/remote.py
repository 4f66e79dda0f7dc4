"""HTTP client for workers hosted on a server node."""

from urllib.parse import quote

import httpx
import structlog

from timetracker.client.interface import WorkerClient
from timetracker.exceptions import NodeUnreachableError, RemoteCallError, WorkerNotFoundError

logger = structlog.get_logger(__name__)


class RemoteWorkerClient(WorkerClient):
    """Calls workers through a server node's HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize remote client.

        Args:
            base_url: Server node base URL
            timeout: Request timeout in seconds
            http_client: Preconfigured client to use instead of creating one
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self.http = http_client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def message(self, name: str) -> str:
        response = await self._request("GET", name, "message")
        try:
            return response.json()["message"]
        except (ValueError, KeyError, TypeError) as e:
            raise RemoteCallError(
                f"Unexpected response from {self.base_url} for worker {name}"
            ) from e

    async def done(self, name: str) -> None:
        await self._request("POST", name, "done")

    async def close(self) -> None:
        if self._owns_client:
            await self.http.aclose()

    async def _request(self, method: str, name: str, operation: str) -> httpx.Response:
        """
        Call a worker operation on the server node.

        Raises:
            NodeUnreachableError: If the server node cannot be reached
            WorkerNotFoundError: If the server has no worker with that name
            RemoteCallError: For any other non-success response
        """
        path = f"/api/v1/workers/{quote(name, safe='')}/{operation}"
        log = logger.bind(method=method, path=path, server=self.base_url)

        try:
            response = await self.http.request(method, path)
        except httpx.TransportError as e:
            log.error("Server node unreachable", error=str(e))
            raise NodeUnreachableError(f"Cannot reach server node at {self.base_url}: {e}") from e

        if response.status_code == 404:
            raise WorkerNotFoundError(name)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.error("Remote call failed", status_code=response.status_code)
            raise RemoteCallError(
                f"{method} {path} failed with status {response.status_code}"
            ) from e

        return response
