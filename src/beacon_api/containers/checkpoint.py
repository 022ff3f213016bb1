"""Checkpoint Container."""

from typing_extensions import Self

from beacon_api.types import Bytes32, Container

from .slot import Epoch


class Checkpoint(Container):
    """Represents a checkpoint in the chain's history."""

    epoch: Epoch
    """The epoch of the checkpoint."""

    root: Bytes32
    """The root hash of the checkpoint's block."""

    @classmethod
    def default(cls) -> Self:
        """Return a default checkpoint."""
        return cls(epoch=0, root=Bytes32.zero())
