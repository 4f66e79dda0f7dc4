"""Worker clients, in-process or remote."""

from timetracker.client.factory import create_client, print_message
from timetracker.client.interface import WorkerClient
from timetracker.client.local import LocalWorkerClient
from timetracker.client.remote import RemoteWorkerClient

__all__ = [
    "WorkerClient",
    "LocalWorkerClient",
    "RemoteWorkerClient",
    "create_client",
    "print_message",
]
