"""Prometheus metrics for the notes client.

All metric objects are defined here so they can be imported from any module.
``serve_metrics`` exposes them on ``/metrics`` for scraping.
"""

import logging

from prometheus_client import Counter, Gauge, Histogram, start_http_server

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Remote store metrics
# ---------------------------------------------------------------------------

REMOTE_REQUESTS = Counter(
    "notes_remote_requests_total",
    "Total requests sent to the remote notes collection",
    ["operation", "status"],  # status: HTTP code or transport_error
)

REMOTE_DURATION = Histogram(
    "notes_remote_request_duration_seconds",
    "Duration of remote notes requests in seconds",
    ["operation"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# ---------------------------------------------------------------------------
# Controller metrics
# ---------------------------------------------------------------------------

NOTES_LOADED = Gauge(
    "notes_loaded",
    "Number of notes held after the last successful load",
)

# ---------------------------------------------------------------------------
# Exporter
# ---------------------------------------------------------------------------


def serve_metrics(port: int) -> bool:
    """Start the Prometheus HTTP exporter on *port*. Returns False when disabled."""
    if port <= 0:
        logger.info("Metrics endpoint disabled")
        return False
    start_http_server(port)
    logger.info("Serving Prometheus metrics on :%d/metrics", port)
    return True
