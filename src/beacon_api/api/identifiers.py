"""
State and validator identifiers.

Both are tagged unions parsed from URL path segments. Parsing only checks
syntax: whether an identifier refers to anything is decided at lookup time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from beacon_api.types import UINT64_MAX, Bytes32, Bytes48

from .errors import BadRequest, ValidatorNotFound

_ROOT_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")
_PUBKEY_PATTERN = re.compile(r"0x[0-9a-fA-F]{96}")
_SLOT_PATTERN = re.compile(r"[0-9]+")
_INDEX_PATTERN = re.compile(r"-?[0-9]+")

_MAX_UINT64_DIGITS = len(str(UINT64_MAX))
"""Digits beyond this many, ignoring leading zeros, are out of u64 range."""


class StateTag(Enum):
    """Symbolic state identifiers."""

    HEAD = "head"
    GENESIS = "genesis"
    JUSTIFIED = "justified"
    FINALIZED = "finalized"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SlotStateId:
    """The canonical state at a slot."""

    slot: int

    def __str__(self) -> str:
        return str(self.slot)


@dataclass(frozen=True, slots=True)
class RootStateId:
    """A state by state root, or by the root of the block that produced it."""

    root: Bytes32

    def __str__(self) -> str:
        return self.root.to_hex_string()


StateId = StateTag | SlotStateId | RootStateId
"""Any state identifier."""


@dataclass(frozen=True, slots=True)
class IndexValidatorId:
    """A validator by registry index. Unbounded: range is checked at lookup."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class PubkeyValidatorId:
    """A validator by public key."""

    pubkey: Bytes48

    def __str__(self) -> str:
        return self.pubkey.to_hex_string()


ValidatorId = IndexValidatorId | PubkeyValidatorId
"""Any validator identifier."""


def parse_state_id(text: str) -> StateId:
    """
    Parse a state identifier path segment.

    Accepts `head`, `genesis`, `justified`, `finalized`, a decimal slot,
    or a 0x-prefixed 32-byte hex root.

    Raises:
        BadRequest: If the text matches none of these forms.
    """
    try:
        return StateTag(text)
    except ValueError:
        pass

    if _SLOT_PATTERN.fullmatch(text):
        if _significant_digits(text) > _MAX_UINT64_DIGITS:
            raise BadRequest(f"Invalid state ID: {text}")
        slot = int(text)
        if slot >= UINT64_MAX:
            raise BadRequest(f"Invalid state ID: {text}")
        return SlotStateId(slot)

    if _ROOT_PATTERN.fullmatch(text):
        return RootStateId(Bytes32(text))

    raise BadRequest(f"Invalid state ID: {text}")


def parse_validator_id(text: str) -> ValidatorId:
    """
    Parse a validator identifier path segment.

    Accepts a decimal index (possibly negative or out of range, which then
    fails lookup) or a 0x-prefixed 48-byte hex public key.

    Indices with more digits than any u64 can hold are never converted and
    fail immediately.

    Raises:
        BadRequest: If the text matches neither form.
        ValidatorNotFound: If the index has too many digits to be a u64.
    """
    if _INDEX_PATTERN.fullmatch(text):
        if _significant_digits(text) > _MAX_UINT64_DIGITS:
            raise ValidatorNotFound(f"Validator not found for index: {text}")
        return IndexValidatorId(int(text))

    if _PUBKEY_PATTERN.fullmatch(text):
        return PubkeyValidatorId(Bytes48(text))

    raise BadRequest(f"Invalid validator ID: {text}")


def _significant_digits(text: str) -> int:
    return len(text.lstrip("-").lstrip("0"))
