"""Builders for validators, states and seeded databases."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from beacon_api.chain import FAR_FUTURE_EPOCH
from beacon_api.containers import Checkpoint, State, Validator
from beacon_api.storage import Database
from beacon_api.types import Bytes32, Bytes48


def make_pubkey(index: int) -> Bytes48:
    """Deterministic, distinct public key per index."""
    return Bytes48(index.to_bytes(8, "big") + b"\xaa" * 40)


def make_validator(
    index: int,
    exit_epoch: int = FAR_FUTURE_EPOCH,
    pubkey: Bytes48 | None = None,
) -> Validator:
    """Build an active validator record."""
    return Validator(
        pubkey=pubkey if pubkey is not None else make_pubkey(index),
        withdrawal_credentials=Bytes32(b"\x01" + b"\x00" * 31),
        effective_balance=32_000_000_000,
        slashed=False,
        activation_eligibility_epoch=0,
        activation_epoch=0,
        exit_epoch=exit_epoch,
        withdrawable_epoch=FAR_FUTURE_EPOCH,
    )


def make_state(
    slot: int = 0,
    num_validators: int | None = None,
    balances: Sequence[int] | None = None,
    validators: Sequence[Validator] | None = None,
) -> State:
    """
    Build a state.

    Without explicit validators, one validator is created per balance (or
    `num_validators` of them, each with a 32 ETH balance).
    """
    if validators is None:
        count = num_validators if num_validators is not None else len(balances or [])
        validators = [make_validator(i) for i in range(count)]
    if balances is None:
        balances = [32_000_000_000] * len(validators)

    return State(
        slot=slot,
        validators=list(validators),
        balances=list(balances),
        current_justified_checkpoint=Checkpoint.default(),
        finalized_checkpoint=Checkpoint.default(),
    )


def block_root_at(slot: int) -> Bytes32:
    """Deterministic block root for a slot."""
    return Bytes32(b"\xbb" + slot.to_bytes(31, "big"))


def state_root_at(slot: int) -> Bytes32:
    """Deterministic state root for a slot."""
    return Bytes32(b"\x5a" + slot.to_bytes(31, "big"))


@dataclass
class SeededChain:
    """Roots of the states written by seed_chain, keyed by slot."""

    block_roots: dict[int, Bytes32] = field(default_factory=dict)
    state_roots: dict[int, Bytes32] = field(default_factory=dict)


def seed_chain(database: Database, states: Sequence[State]) -> SeededChain:
    """Store states and index each one's block root by its slot."""
    chain = SeededChain()
    for state in states:
        block_root = block_root_at(state.slot)
        state_root = state_root_at(state.slot)
        database.put_state(state, state_root, block_root)
        database.put_block_root_by_slot(state.slot, block_root)
        chain.block_roots[state.slot] = block_root
        chain.state_roots[state.slot] = state_root
    return chain
