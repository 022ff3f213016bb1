"""
Metric registry using prometheus_client.

Provides pre-defined metrics for the validator API.
Exposes metrics in Prometheus text format via the /metrics endpoint.
"""

from __future__ import annotations

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Using a dedicated registry avoids pollution from default Python process metrics.
REGISTRY = CollectorRegistry()

# -----------------------------------------------------------------------------
# Chain Information
# -----------------------------------------------------------------------------

head_slot = Gauge(
    "beacon_api_head_slot",
    "Highest slot seen in the slot index",
    registry=REGISTRY,
)

# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------

api_requests = Counter(
    "beacon_api_requests_total",
    "API requests served",
    labelnames=("endpoint", "status"),
    registry=REGISTRY,
)

api_request_time = Histogram(
    "beacon_api_request_seconds",
    "API request duration",
    labelnames=("endpoint",),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics output.

    Returns:
        Prometheus text format output as bytes.
    """
    return generate_latest(REGISTRY)
