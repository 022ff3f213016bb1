"""
Shared pytest fixtures for all beacon_api tests.

Provides core fixtures used across multiple test modules.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from beacon_api.api import StateResolver, ValidatorQueryEngine
from beacon_api.containers import State
from beacon_api.storage import SQLiteDatabase
from tests.beacon_api.helpers import SeededChain, make_state, seed_chain


@pytest.fixture
def db() -> Generator[SQLiteDatabase, None, None]:
    """Create an in-memory SQLite database for testing."""
    database = SQLiteDatabase(":memory:")
    yield database
    database.close()


@pytest.fixture
def example_state() -> State:
    """Three validators with balances 32 ETH, 31.5 ETH and zero, at genesis."""
    return make_state(slot=0, balances=[32_000_000_000, 31_500_000_000, 0])


@pytest.fixture
def chain(db: SQLiteDatabase, example_state: State) -> SeededChain:
    """Database holding the example state at genesis and a later head state."""
    head = make_state(slot=40, balances=[32_000_000_100, 31_500_000_100, 0])
    return seed_chain(db, [example_state, head])


@pytest.fixture
def engine(db: SQLiteDatabase, chain: SeededChain) -> ValidatorQueryEngine:
    """Query engine reading from the seeded database."""
    return ValidatorQueryEngine(StateResolver(db))
