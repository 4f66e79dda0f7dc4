"""FastAPI application factory."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from timetracker import __version__
from timetracker.api.dependencies import cleanup_resources, get_registry
from timetracker.api.models import HealthResponse
from timetracker.api.routes import router
from timetracker.config import settings
from timetracker.exceptions import AlreadyStartedError
from timetracker.utils.logging import setup_logging
from timetracker.utils.metrics import metrics
from timetracker.worker.registry import WorkerRegistry

logger = structlog.get_logger(__name__)


def start_configured_worker(registry: WorkerRegistry) -> None:
    """Start the configured worker and launch its loop in the background."""
    try:
        worker = registry.start_worker(
            settings.worker.name,
            settings.worker.message,
            interval_seconds=settings.worker.interval_seconds,
        )
    except AlreadyStartedError as e:
        worker = e.worker

    worker.start()


def create_app(registry: WorkerRegistry | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        registry: Registry to serve instead of the global one

    Returns:
        Configured FastAPI application
    """

    def current_registry() -> WorkerRegistry:
        return registry if registry is not None else get_registry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        setup_logging()
        logger.info("Starting TimeTracker server node", version=__version__)

        if settings.worker.autostart:
            start_configured_worker(current_registry())

        yield

        # Shutdown
        logger.info("Shutting down TimeTracker server node")
        if registry is not None:
            await registry.shutdown_all()
        else:
            await cleanup_resources()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="TimeTracker",
        description="Periodic timestamp worker with a remotely callable message query",
        version=__version__,
        lifespan=lifespan,
    )

    if registry is not None:
        app.dependency_overrides[get_registry] = lambda: registry

    # Include routers
    app.include_router(router)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """
        Health check endpoint.

        Returns:
            Health status of the application and each worker loop
        """
        components = {"api": "healthy"}
        workers = current_registry()
        for name in workers.names():
            components[f"worker:{name}"] = "running" if workers.get(name).running else "stopped"

        overall_status = (
            "healthy" if all(v in ("healthy", "running") for v in components.values()) else "degraded"
        )

        return HealthResponse(
            status=overall_status,
            version=__version__,
            timestamp=datetime.now(timezone.utc),
            components=components,
        )

    # Metrics endpoint
    if settings.monitoring.metrics_enabled:

        @app.get("/metrics", tags=["monitoring"])
        async def metrics_endpoint() -> Response:
            """
            Prometheus metrics endpoint.

            Returns:
                Prometheus metrics in text format
            """
            return Response(
                content=generate_latest(metrics.registry),
                media_type=CONTENT_TYPE_LATEST,
            )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        log = logger.bind(
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None,
        )

        log.debug("Request received")
        response = await call_next(request)
        log.info("Request completed", status_code=response.status_code)

        if settings.monitoring.metrics_enabled:
            metrics.api_requests_total.labels(
                method=request.method,
                endpoint=request.url.path,
                status=response.status_code,
            ).inc()

        return response

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception occurred", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "An unexpected error occurred"},
        )

    return app
