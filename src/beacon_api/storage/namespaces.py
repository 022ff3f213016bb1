"""
Database namespace definitions for storage tables.

Defines table names and schema constants for SQLite storage.
Each namespace represents a logical grouping of related data.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StateNamespace:
    """
    Namespace for state storage.

    States are stored by their state root and also looked up by the root of
    the block that produced them.
    """

    TABLE_NAME: str = "states"
    """Table name for state storage."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS states (
            root BLOB PRIMARY KEY,
            block_root BLOB NOT NULL,
            slot INTEGER NOT NULL,
            data BLOB NOT NULL
        )
    """
    """SQL to create states table."""

    CREATE_INDEX: str = """
        CREATE INDEX IF NOT EXISTS idx_states_block_root ON states(block_root)
    """
    """SQL to create block root index."""


@dataclass(frozen=True, slots=True)
class SlotIndexNamespace:
    """
    Namespace for slot-to-root mapping.

    Enables lookup of the canonical block by slot number.
    The maximum key doubles as the chain head slot.
    """

    TABLE_NAME: str = "slot_index"
    """Table name for slot index."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS slot_index (
            slot INTEGER PRIMARY KEY,
            root BLOB NOT NULL
        )
    """
    """SQL to create slot index table."""


@dataclass(frozen=True, slots=True)
class CheckpointNamespace:
    """
    Namespace for checkpoint tracking.

    Stores latest justified and finalized checkpoints.
    Uses a key-value pattern with fixed keys.
    """

    TABLE_NAME: str = "checkpoints"
    """Table name for checkpoint storage."""

    KEY_JUSTIFIED: str = "justified"
    """Key for justified checkpoint."""

    KEY_FINALIZED: str = "finalized"
    """Key for finalized checkpoint."""

    CREATE_TABLE: str = """
        CREATE TABLE IF NOT EXISTS checkpoints (
            key TEXT PRIMARY KEY,
            data BLOB NOT NULL
        )
    """
    """SQL to create checkpoints table."""


STATES = StateNamespace()
SLOT_INDEX = SlotIndexNamespace()
CHECKPOINTS = CheckpointNamespace()

ALL_NAMESPACES = [STATES, SLOT_INDEX, CHECKPOINTS]
"""All namespace definitions for schema initialization."""
