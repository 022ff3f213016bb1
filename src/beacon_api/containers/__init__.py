"""
The container types consumed by the validator queries.

Containers are immutable pydantic models. Their JSON form follows Beacon API
conventions: 64-bit integers as quoted decimals and byte strings as 0x-hex.
"""

from .checkpoint import Checkpoint
from .slot import Epoch, Gwei, Slot, compute_epoch_at_slot
from .state import State
from .validator import Validator, ValidatorIndex

__all__ = [
    "Checkpoint",
    "Epoch",
    "Gwei",
    "Slot",
    "State",
    "Validator",
    "ValidatorIndex",
    "compute_epoch_at_slot",
]
