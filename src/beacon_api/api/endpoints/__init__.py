"""API endpoint handlers."""

from . import health, metrics, validators

__all__ = [
    "health",
    "metrics",
    "validators",
]
