#!/usr/bin/env python3
"""
Example: drive a server node's worker from a separate session

The server node prints a timestamp every 5 seconds. This script plays the
client node: it queries the worker's message a few times and sends a done
notification, without ever waiting on the timestamp loop.

Usage:
    # Terminal 1: start the server node
    TIMETRACKER_WORKER__MESSAGE="Hello World" timetracker-server

    # Terminal 2: run this example
    python examples/remote_query_example.py

Requirements:
    - A server node running on localhost:8000
"""

import asyncio
import time

from timetracker.client import RemoteWorkerClient
from timetracker.exceptions import TimeTrackerError


async def main(base_url: str = "http://localhost:8000", name: str = "time_tracker"):
    async with RemoteWorkerClient(base_url) as client:
        for attempt in range(1, 4):
            started = time.monotonic()
            try:
                message = await client.message(name)
            except TimeTrackerError as e:
                print(f"❌ Query failed: {e}")
                return

            elapsed_ms = (time.monotonic() - started) * 1000
            print(f"📥 Query {attempt}: {message!r} ({elapsed_ms:.1f} ms)")
            await asyncio.sleep(2)

        await client.done(name)
        print("📤 Done notification sent; the server keeps printing timestamps")


if __name__ == "__main__":
    asyncio.run(main())
