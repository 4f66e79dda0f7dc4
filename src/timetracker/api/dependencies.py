"""Dependency injection for FastAPI."""

from timetracker.config import settings
from timetracker.worker.registry import WorkerRegistry

# Global instance
_registry_instance: WorkerRegistry | None = None


def get_registry() -> WorkerRegistry:
    """
    Get worker registry instance.

    Returns:
        Worker registry instance
    """
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = WorkerRegistry(on_conflict=settings.worker.on_conflict)
    return _registry_instance


async def cleanup_resources():
    """Stop every timestamp loop and drop the registry."""
    global _registry_instance

    if _registry_instance:
        await _registry_instance.shutdown_all()
        _registry_instance = None
