"""Prometheus metrics for outbound Canvas API calls."""

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "canvas_requests_total",
    "Total outbound Canvas API requests",
    ["method", "status"],
)

REQUEST_DURATION = Histogram(
    "canvas_request_duration_seconds",
    "Outbound Canvas API request duration in seconds",
    ["method"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 20, 30],
)


def record_request(method: str, status: int | str, duration: float) -> None:
    """Record one finished request. ``status`` is an HTTP code, "timeout" or "error"."""
    REQUEST_COUNT.labels(method=method, status=str(status)).inc()
    REQUEST_DURATION.labels(method=method).observe(duration)
