"""Node entrypoint: host the worker (server) or drive a remote one (client)."""

import asyncio
import sys
from typing import TextIO

import structlog

from timetracker.client.factory import create_client, print_message
from timetracker.client.interface import WorkerClient
from timetracker.config import settings
from timetracker.exceptions import TimeTrackerError
from timetracker.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

PROMPT_HELP = "commands: message, done, quit"


async def run_client_session(
    client: WorkerClient,
    name: str,
    stdin: TextIO | None = None,
) -> None:
    """
    Read commands line by line and forward them to a worker.

    Lines are read on a worker thread so the event loop stays free while
    waiting for input.

    Args:
        client: Client reaching the worker
        name: Worker name
        stdin: Command stream (stdin when omitted)
    """
    stream = stdin if stdin is not None else sys.stdin
    log = logger.bind(worker=name)

    while True:
        line = await asyncio.to_thread(stream.readline)
        if not line:
            break

        command = line.strip().lower()
        if not command:
            continue
        if command in ("quit", "exit"):
            break

        try:
            if command == "message":
                await print_message(client, name)
            elif command == "done":
                await client.done(name)
                log.info("Done notification sent")
            else:
                log.warning("Unknown command", command=command, help=PROMPT_HELP)
        except TimeTrackerError as e:
            log.error("Command failed", command=command, error=str(e))

    log.info("Client session ended")


async def run_client(name: str) -> None:
    """Connect to the server node and run a command session."""
    async with create_client() as client:
        await run_client_session(client, name)


def main():
    """Main entry point for a node."""
    setup_logging()

    if settings.node.role == "server":
        from timetracker.api.listener import main as run_server

        logger.info("Starting node", role="server", worker=settings.worker.name)
        run_server()
    else:
        name = sys.argv[1] if len(sys.argv) > 1 else settings.worker.name
        logger.info("Starting node", role="client", worker=name)
        asyncio.run(run_client(name))


if __name__ == "__main__":
    main()
