"""
SQLite database implementation for chain state storage.

This module provides persistent storage for:

- States indexed by state root and by producing block root
- Slot-to-block-root mappings, whose maximum is the chain head
- Checkpoints for tracking justification and finalization

Containers are stored as encoded bytes in BLOB columns.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from beacon_api.containers import Checkpoint, Slot, State
from beacon_api.types import Bytes32

from .exceptions import StorageError
from .namespaces import ALL_NAMESPACES, CHECKPOINTS, SLOT_INDEX, STATES


@contextmanager
def _reading(what: str) -> Iterator[None]:
    """Re-raise driver and decoding failures as StorageError."""
    try:
        yield
    except (sqlite3.Error, ValidationError) as e:
        raise StorageError(f"Failed to read {what}: {e}") from e


class SQLiteDatabase:
    """
    SQLite implementation of the Database protocol.

    Stores chain data in a single SQLite file.
    Thread-safe through SQLite's built-in locking.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Initialize SQLite database.

        Creates database file and tables if they don't exist.

        Args:
            path: Path to SQLite database file.
                  Use ":memory:" for in-memory database.
        """
        self._path = Path(path) if isinstance(path, str) else path

        # Requests read from worker threads, so the connection is shared.
        self._conn = sqlite3.connect(
            str(self._path),
            check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row

        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        cursor = self._conn.cursor()
        for namespace in ALL_NAMESPACES:
            cursor.execute(namespace.CREATE_TABLE)

        # States are reached by block root for slot and checkpoint lookups.
        cursor.execute(STATES.CREATE_INDEX)
        self._conn.commit()

    # -------------------------------------------------------------------------
    # State Operations
    # -------------------------------------------------------------------------

    def get_state(self, root: Bytes32) -> State | None:
        """Retrieve a state by its state root."""
        with _reading("state"):
            cursor = self._conn.cursor()
            cursor.execute(
                f"SELECT data FROM {STATES.TABLE_NAME} WHERE root = ?",
                (bytes(root),),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return State.decode_bytes(row["data"])

    def get_state_by_block_root(self, block_root: Bytes32) -> State | None:
        """Retrieve the post-state of a block."""
        with _reading("state"):
            cursor = self._conn.cursor()

            # A block has exactly one post-state; LIMIT keeps the query cheap
            # if a state was re-stored under a different state root.
            cursor.execute(
                f"SELECT data FROM {STATES.TABLE_NAME} WHERE block_root = ? LIMIT 1",
                (bytes(block_root),),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return State.decode_bytes(row["data"])

    def put_state(self, state: State, root: Bytes32, block_root: Bytes32) -> None:
        """Store a state with its state root and producing block root."""
        cursor = self._conn.cursor()
        cursor.execute(
            f"""
            INSERT OR REPLACE INTO {STATES.TABLE_NAME} (root, block_root, slot, data)
            VALUES (?, ?, ?, ?)
            """,
            (bytes(root), bytes(block_root), int(state.slot), state.encode_bytes()),
        )
        self._conn.commit()

    def has_state(self, root: Bytes32) -> bool:
        """Check if a state exists in storage."""
        with _reading("state"):
            cursor = self._conn.cursor()
            cursor.execute(
                f"SELECT 1 FROM {STATES.TABLE_NAME} WHERE root = ?",
                (bytes(root),),
            )
            return cursor.fetchone() is not None

    # -------------------------------------------------------------------------
    # Slot Index Operations
    # -------------------------------------------------------------------------
    #
    # Not every slot has a block (missed slots happen), so the index is sparse.

    def get_block_root_by_slot(self, slot: Slot) -> Bytes32 | None:
        """Retrieve block root for a specific slot."""
        with _reading("slot index"):
            cursor = self._conn.cursor()
            cursor.execute(
                f"SELECT root FROM {SLOT_INDEX.TABLE_NAME} WHERE slot = ?",
                (int(slot),),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return Bytes32(row["root"])

    def put_block_root_by_slot(self, slot: Slot, root: Bytes32) -> None:
        """Index a block root by its slot."""
        cursor = self._conn.cursor()
        cursor.execute(
            f"""
            INSERT OR REPLACE INTO {SLOT_INDEX.TABLE_NAME} (slot, root)
            VALUES (?, ?)
            """,
            (int(slot), bytes(root)),
        )
        self._conn.commit()

    def get_highest_slot(self) -> Slot | None:
        """Retrieve the highest slot present in the slot index."""
        with _reading("slot index"):
            cursor = self._conn.cursor()

            # MAX over an empty table yields a single NULL row.
            cursor.execute(f"SELECT MAX(slot) AS slot FROM {SLOT_INDEX.TABLE_NAME}")
            row = cursor.fetchone()
            if row is None or row["slot"] is None:
                return None
            return int(row["slot"])

    # -------------------------------------------------------------------------
    # Checkpoint Operations
    # -------------------------------------------------------------------------

    def _get_checkpoint(self, key: str) -> Checkpoint | None:
        with _reading("checkpoint"):
            cursor = self._conn.cursor()
            cursor.execute(
                f"SELECT data FROM {CHECKPOINTS.TABLE_NAME} WHERE key = ?",
                (key,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return Checkpoint.decode_bytes(row["data"])

    def _put_checkpoint(self, key: str, checkpoint: Checkpoint) -> None:
        cursor = self._conn.cursor()
        cursor.execute(
            f"""
            INSERT OR REPLACE INTO {CHECKPOINTS.TABLE_NAME} (key, data)
            VALUES (?, ?)
            """,
            (key, checkpoint.encode_bytes()),
        )
        self._conn.commit()

    def get_justified_checkpoint(self) -> Checkpoint | None:
        """Retrieve the latest justified checkpoint."""
        return self._get_checkpoint(CHECKPOINTS.KEY_JUSTIFIED)

    def put_justified_checkpoint(self, checkpoint: Checkpoint) -> None:
        """Store the latest justified checkpoint."""
        self._put_checkpoint(CHECKPOINTS.KEY_JUSTIFIED, checkpoint)

    def get_finalized_checkpoint(self) -> Checkpoint | None:
        """Retrieve the latest finalized checkpoint."""
        return self._get_checkpoint(CHECKPOINTS.KEY_FINALIZED)

    def put_finalized_checkpoint(self, checkpoint: Checkpoint) -> None:
        """Store the latest finalized checkpoint."""
        self._put_checkpoint(CHECKPOINTS.KEY_FINALIZED, checkpoint)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close database connection."""
        self._conn.close()

    def __enter__(self) -> SQLiteDatabase:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()
