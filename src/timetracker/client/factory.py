"""Factory for creating worker clients."""

import structlog

from timetracker.client.interface import WorkerClient
from timetracker.client.local import LocalWorkerClient
from timetracker.client.remote import RemoteWorkerClient
from timetracker.config import settings
from timetracker.exceptions import ConfigurationError
from timetracker.worker.registry import WorkerRegistry

logger = structlog.get_logger(__name__)


def create_client(registry: WorkerRegistry | None = None) -> WorkerClient:
    """
    Create a worker client for this node's role.

    Args:
        registry: Local registry, required on a server node

    Returns:
        Local client on a server node, HTTP client on a client node

    Raises:
        ConfigurationError: If a server node has no registry
    """
    role = settings.node.role

    if role == "server":
        if registry is None:
            raise ConfigurationError("A server node needs a worker registry")
        return LocalWorkerClient(registry)
    elif role == "client":
        logger.info("Connecting to server node", server_url=settings.node.server_url)
        return RemoteWorkerClient(
            settings.node.server_url,
            timeout=settings.node.request_timeout,
        )
    else:
        raise ConfigurationError(f"Unsupported node role: {role}")


async def print_message(client: WorkerClient, name: str) -> str:
    """
    Fetch a worker's message, print it and return it.

    Args:
        client: Client reaching the worker
        name: Worker name

    Returns:
        The message
    """
    message = await client.message(name)
    print(message, flush=True)
    return message
