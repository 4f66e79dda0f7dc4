"""Prometheus metrics for monitoring."""

from prometheus_client import CollectorRegistry, Counter, Gauge

# Create registry
registry = CollectorRegistry()

# API metrics
api_requests_total = Counter(
    "timetracker_api_requests_total",
    "Total API requests",
    ["method", "endpoint", "status"],
    registry=registry,
)

# Worker metrics
worker_active = Gauge(
    "timetracker_worker_active",
    "Workers with a running timestamp loop",
    ["worker"],
    registry=registry,
)

ticks_total = Counter(
    "timetracker_ticks_total",
    "Timestamp lines emitted",
    ["worker"],
    registry=registry,
)

queries_total = Counter(
    "timetracker_queries_total",
    "Message queries answered",
    ["worker"],
    registry=registry,
)

done_total = Counter(
    "timetracker_done_total",
    "Done notifications received",
    ["worker"],
    registry=registry,
)


class Metrics:
    """Metrics wrapper for easy access."""

    def __init__(self):
        self.api_requests_total = api_requests_total
        self.worker_active = worker_active
        self.ticks_total = ticks_total
        self.queries_total = queries_total
        self.done_total = done_total
        self.registry = registry


metrics = Metrics()
