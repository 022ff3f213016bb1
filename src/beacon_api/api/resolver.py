"""
State resolution.

Translates a state identifier into a stored state. Every call re-reads the
database: there is no cache, so a resolved state always reflects what is
stored at the time of the request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TypeVar

from beacon_api.containers import Checkpoint, Slot, State
from beacon_api.metrics import head_slot
from beacon_api.storage import Database, StorageError
from beacon_api.types import Bytes32

from .errors import InternalError, NotFound
from .identifiers import RootStateId, SlotStateId, StateId, StateTag

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENESIS_SLOT = 0
"""Slot of the genesis state."""


class StateResolver:
    """
    Resolves state identifiers against a database.

    Database reads are blocking, so each one runs in a worker thread.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    async def _read(self, read: Callable[..., T], *args: object) -> T:
        """Run one database read off the event loop, mapping storage failures."""
        try:
            return await asyncio.to_thread(read, *args)
        except StorageError as e:
            logger.error(f"Database read failed: {e}")
            raise InternalError() from e

    async def highest_slot(self) -> Slot:
        """
        Return the highest slot in the slot index.

        Raises:
            NotFound: If no slot has been indexed yet.
            InternalError: If the slot index cannot be read.
        """
        slot = await self._read(self.database.get_highest_slot)
        if slot is None:
            raise NotFound("Failed to find highest slot")

        head_slot.set(slot)
        return slot

    async def resolve(self, state_id: StateId) -> State:
        """
        Resolve an identifier to a state.

        Raises:
            NotFound: If the identifier maps to no stored state.
            InternalError: If the database cannot be read.
        """
        match state_id:
            case StateTag.HEAD:
                state = await self._state_at_slot(await self.highest_slot())
            case StateTag.GENESIS:
                state = await self._state_at_slot(GENESIS_SLOT)
            case StateTag.JUSTIFIED:
                state = await self._state_at_checkpoint(
                    await self._read(self.database.get_justified_checkpoint)
                )
            case StateTag.FINALIZED:
                state = await self._state_at_checkpoint(
                    await self._read(self.database.get_finalized_checkpoint)
                )
            case SlotStateId(slot=slot):
                state = await self._state_at_slot(slot)
            case RootStateId(root=root):
                state = await self._state_at_root(root)

        if state is None:
            raise NotFound(f"State not found for state ID: {state_id}")

        logger.debug(f"Resolved state {state_id} to slot {state.slot}")
        return state

    async def _state_at_slot(self, slot: int) -> State | None:
        block_root = await self._read(self.database.get_block_root_by_slot, slot)
        if block_root is None:
            return None
        return await self._read(self.database.get_state_by_block_root, block_root)

    async def _state_at_checkpoint(self, checkpoint: Checkpoint | None) -> State | None:
        if checkpoint is None:
            return None
        return await self._read(self.database.get_state_by_block_root, checkpoint.root)

    async def _state_at_root(self, root: Bytes32) -> State | None:
        # A hex root may name either a state or the block that produced it.
        state = await self._read(self.database.get_state, root)
        if state is None:
            state = await self._read(self.database.get_state_by_block_root, root)
        return state
