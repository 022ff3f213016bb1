"""State Container."""

from __future__ import annotations

from beacon_api.types import Container

from .checkpoint import Checkpoint
from .slot import Gwei, Slot, compute_epoch_at_slot
from .validator import Validator


class State(Container):
    """
    The chain state at a given slot, as far as validator queries need it.

    `validators` and `balances` are co-indexed: the balance of the validator
    at position `i` is `balances[i]`.
    """

    slot: Slot
    """The slot this state was produced at."""

    validators: list[Validator]
    """The validator registry, in index order."""

    balances: list[Gwei]
    """Validator balances, parallel to `validators`."""

    current_justified_checkpoint: Checkpoint
    """The latest justified checkpoint seen by this state."""

    finalized_checkpoint: Checkpoint
    """The latest finalized checkpoint seen by this state."""

    def get_current_epoch(self) -> int:
        """Return the epoch of this state's slot."""
        return compute_epoch_at_slot(self.slot)
