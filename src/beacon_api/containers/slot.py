"""Slot, epoch and balance units."""

from beacon_api.chain.config import SLOTS_PER_EPOCH
from beacon_api.types import Uint64

Slot = Uint64
"""A slot number."""

Epoch = Uint64
"""An epoch number: SLOTS_PER_EPOCH consecutive slots."""

Gwei = Uint64
"""An amount of ether denominated in gwei."""


def compute_epoch_at_slot(slot: int) -> int:
    """Return the epoch containing `slot`."""
    return slot // SLOTS_PER_EPOCH
