"""Custom exceptions for TimeTracker."""


class TimeTrackerError(Exception):
    """Base exception for TimeTracker."""

    pass


class AlreadyStartedError(TimeTrackerError):
    """Exception raised when a worker name is already taken.

    The existing worker is attached so callers can keep using it.
    """

    def __init__(self, name: str, worker):
        super().__init__(f"Worker already started: {name}")
        self.name = name
        self.worker = worker


class WorkerNotFoundError(TimeTrackerError):
    """Exception raised when no worker is registered under a name."""

    def __init__(self, name: str):
        super().__init__(f"Worker not found: {name}")
        self.name = name


class ConfigurationError(TimeTrackerError):
    """Exception raised for configuration errors."""

    pass


class RemoteCallError(TimeTrackerError):
    """Exception raised when a call to a server node fails."""

    pass


class NodeUnreachableError(RemoteCallError):
    """Exception raised when the server node cannot be reached."""

    pass
