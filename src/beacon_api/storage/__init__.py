"""
Storage module for persisted chain states.

Provides the database abstraction the state resolver reads from.
Uses SQLite for simplicity and correctness.
"""

from .database import Database
from .exceptions import StorageError
from .namespaces import CheckpointNamespace, SlotIndexNamespace, StateNamespace
from .sqlite import SQLiteDatabase

__all__ = [
    "Database",
    "SQLiteDatabase",
    "StorageError",
    "StateNamespace",
    "SlotIndexNamespace",
    "CheckpointNamespace",
]
