"""API route handlers."""

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from timetracker.api.dependencies import get_registry
from timetracker.api.models import DoneResponse, MessageResponse, WorkerInfo, WorkerListResponse
from timetracker.exceptions import WorkerNotFoundError
from timetracker.worker.registry import WorkerRegistry
from timetracker.worker.worker import TimeTracker

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["workers"])


def _lookup(registry: WorkerRegistry, name: str) -> TimeTracker:
    try:
        return registry.get(name)
    except WorkerNotFoundError as e:
        logger.warning("Worker not found", worker=name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get(
    "/workers",
    response_model=WorkerListResponse,
    summary="List workers",
)
async def list_workers(registry: WorkerRegistry = Depends(get_registry)) -> WorkerListResponse:
    """List registered workers and the state of their loops."""
    workers = [registry.get(name) for name in registry.names()]
    return WorkerListResponse(
        workers=[
            WorkerInfo(
                name=worker.name,
                running=worker.running,
                interval_seconds=worker.interval_seconds,
            )
            for worker in workers
        ]
    )


@router.get(
    "/workers/{name}/message",
    response_model=MessageResponse,
    summary="Query a worker's message",
    description="Return the message the worker was started with",
)
async def get_message(
    name: str,
    registry: WorkerRegistry = Depends(get_registry),
) -> MessageResponse:
    """
    Query a worker for its initialization message.

    Args:
        name: Worker name
        registry: Worker registry

    Returns:
        The worker's message

    Raises:
        HTTPException: If the worker does not exist
    """
    worker = _lookup(registry, name)
    return MessageResponse(name=worker.name, message=worker.message())


@router.post(
    "/workers/{name}/done",
    response_model=DoneResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Notify a worker",
    description="Fire-and-forget notification; the timestamp loop keeps running",
)
async def notify_done(
    name: str,
    background_tasks: BackgroundTasks,
    registry: WorkerRegistry = Depends(get_registry),
) -> DoneResponse:
    """Accept a done notification and deliver it after responding."""
    worker = _lookup(registry, name)
    background_tasks.add_task(worker.done)
    return DoneResponse(name=worker.name)
