"""HTTP API listener entrypoint for a server node."""

import structlog
import uvicorn

from timetracker.api.app import create_app
from timetracker.config import settings
from timetracker.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def main():
    """Run the server node: host the worker and serve its API."""
    setup_logging()
    logger.info(
        "Starting HTTP listener",
        host=settings.server.host,
        port=settings.server.port,
    )

    # A single process: the worker lives in this event loop
    app = create_app()
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,  # Use our logging configuration
    )


if __name__ == "__main__":
    main()
