"""
Abstract database interface for chain state storage.

Defines the Protocol that all database implementations must follow.
Uses structural subtyping for flexibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from beacon_api.containers import Checkpoint, Slot, State
    from beacon_api.types import Bytes32


class Database(Protocol):
    """
    Protocol for chain state storage.

    Uses structural subtyping - any class with matching methods satisfies the protocol.

    Storage Organization
    --------------------
    - States: Indexed by state root, and by the root of the block that produced them
    - Slot index: Canonical block root per slot
    - Checkpoints: Justified and finalized tracking

    Read methods raise StorageError when the store itself is unreadable.
    """

    # -------------------------------------------------------------------------
    # State Operations
    # -------------------------------------------------------------------------

    def get_state(self, root: Bytes32) -> State | None:
        """
        Retrieve a state by its state root.

        Args:
            root: Root hash of the state.

        Returns:
            State if found, None otherwise.
        """
        ...

    def get_state_by_block_root(self, block_root: Bytes32) -> State | None:
        """
        Retrieve the post-state of a block.

        Args:
            block_root: Root hash of the block that produced the state.

        Returns:
            State if found, None otherwise.
        """
        ...

    def put_state(self, state: State, root: Bytes32, block_root: Bytes32) -> None:
        """
        Store a state with its state root and producing block root.

        Args:
            state: State to store.
            root: Pre-computed state root.
            block_root: Root of the block whose post-state this is.
        """
        ...

    def has_state(self, root: Bytes32) -> bool:
        """
        Check if a state exists in storage.

        Args:
            root: Root hash of the state.

        Returns:
            True if state exists.
        """
        ...

    # -------------------------------------------------------------------------
    # Slot Index Operations
    # -------------------------------------------------------------------------

    def get_block_root_by_slot(self, slot: Slot) -> Bytes32 | None:
        """
        Retrieve block root for a specific slot.

        Args:
            slot: Slot number to look up.

        Returns:
            Block root at that slot, or None if no block.
        """
        ...

    def put_block_root_by_slot(self, slot: Slot, root: Bytes32) -> None:
        """
        Index a block root by its slot.

        Args:
            slot: Slot of the block.
            root: Root hash of the block.
        """
        ...

    def get_highest_slot(self) -> Slot | None:
        """
        Retrieve the highest slot present in the slot index.

        Returns:
            Highest indexed slot, or None if the index is empty.
        """
        ...

    # -------------------------------------------------------------------------
    # Checkpoint Operations
    # -------------------------------------------------------------------------

    def get_justified_checkpoint(self) -> Checkpoint | None:
        """Retrieve the latest justified checkpoint, or None if not set."""
        ...

    def put_justified_checkpoint(self, checkpoint: Checkpoint) -> None:
        """Store the latest justified checkpoint."""
        ...

    def get_finalized_checkpoint(self) -> Checkpoint | None:
        """Retrieve the latest finalized checkpoint, or None if not set."""
        ...

    def put_finalized_checkpoint(self, checkpoint: Checkpoint) -> None:
        """Store the latest finalized checkpoint."""
        ...

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close database connection and release resources."""
        ...
