"""
Metrics module for observability.

Provides counters, gauges, and histograms for tracking API behavior.
Exposes metrics in Prometheus text format.
"""

from .registry import (
    REGISTRY,
    api_request_time,
    api_requests,
    generate_metrics,
    head_slot,
)

__all__ = [
    "REGISTRY",
    "api_request_time",
    "api_requests",
    "generate_metrics",
    "head_slot",
]
