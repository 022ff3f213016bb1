"""Chain presets and constants."""

from .config import FAR_FUTURE_EPOCH, SLOTS_PER_EPOCH

__all__ = [
    "FAR_FUTURE_EPOCH",
    "SLOTS_PER_EPOCH",
]
