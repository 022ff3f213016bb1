"""
Validator queries.

Answers the two validator query shapes against a resolved state:

- A single validator, found by index or public key, with its balance and status
- A balance listing, optionally filtered to a set of validator identifiers
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from beacon_api.containers import State, Validator

from .errors import NotFound, TooManyValidatorIds, ValidatorNotFound
from .identifiers import (
    IndexValidatorId,
    PubkeyValidatorId,
    SlotStateId,
    StateId,
    ValidatorId,
)
from .resolver import StateResolver
from .responses import ValidatorBalance, ValidatorData

logger = logging.getLogger(__name__)

MAX_VALIDATOR_IDS: Final = 1000
"""Largest number of distinct identifiers a balance filter may contain."""

STATUS_ACTIVE_ONGOING: Final = "active_ongoing"
STATUS_OFFLINE: Final = "offline"


class ValidatorQueryEngine:
    """
    Runs validator queries.

    Holds the state resolver it reads through, so that status derivation can
    resolve the chain head independently of the state being queried.
    """

    def __init__(self, resolver: StateResolver) -> None:
        self.resolver = resolver

    async def get_validator(self, state_id: StateId, validator_id: ValidatorId) -> ValidatorData:
        """
        Look up one validator in a state.

        The status is derived from the current head, not from the queried state.

        Raises:
            ValidatorNotFound: If no validator matches the identifier.
            NotFound: If the state is missing, or the state has no balance for
                the matched validator.
            InternalError: If the database cannot be read.
        """
        state = await self.resolver.resolve(state_id)
        index, validator = _find_validator(state, validator_id)

        if index >= len(state.balances):
            raise NotFound(f"Balance not found for validator index: {index}")
        balance = state.balances[index]

        status = await self.validator_status(validator)

        return ValidatorData(index=index, balance=balance, status=status, validator=validator)

    async def validator_status(self, validator: Validator) -> str:
        """
        Classify a validator against the chain head.

        A validator whose exit epoch is before the head's current epoch is
        offline; every other validator is reported as active.
        """
        head = await self.resolver.resolve(SlotStateId(await self.resolver.highest_slot()))

        if validator.exit_epoch < head.get_current_epoch():
            return STATUS_OFFLINE
        return STATUS_ACTIVE_ONGOING

    async def get_balances(
        self,
        state_id: StateId,
        ids: Iterable[str] | None = None,
    ) -> list[ValidatorBalance]:
        """
        List validator balances in a state, in index order.

        Args:
            state_id: State to read.
            ids: Optional identifiers (decimal indices or 0x-hex public keys,
                freely mixed). None or empty means every validator.

        Raises:
            TooManyValidatorIds: If more than MAX_VALIDATOR_IDS distinct ids are given.
            NotFound: If the state is missing.
            InternalError: If the database cannot be read.
        """
        state = await self.resolver.resolve(state_id)

        id_filter = set(ids or ()) or None
        if id_filter is not None and len(id_filter) > MAX_VALIDATOR_IDS:
            raise TooManyValidatorIds("Too many validator IDs in request")

        balances: list[ValidatorBalance] = []
        for i, validator in enumerate(state.validators):
            if (
                id_filter is not None
                and str(i) not in id_filter
                and validator.pubkey_string() not in id_filter
            ):
                continue

            # A short balance list is tolerated here: listings are best-effort.
            balance = state.balances[i] if i < len(state.balances) else 0
            balances.append(ValidatorBalance(index=str(i), balance=str(balance)))

        logger.debug(f"Listed {len(balances)} balances at slot {state.slot}")
        return balances


def _find_validator(state: State, validator_id: ValidatorId) -> tuple[int, Validator]:
    """Return the index and record of the validator an identifier refers to."""
    match validator_id:
        case IndexValidatorId(index=index):
            if 0 <= index < len(state.validators):
                return index, state.validators[index]
            raise ValidatorNotFound(f"Validator not found for index: {index}")

        case PubkeyValidatorId(pubkey=pubkey):
            # First match wins should a public key ever appear twice.
            for index, validator in enumerate(state.validators):
                if validator.pubkey == pubkey:
                    return index, validator
            raise ValidatorNotFound(f"Validator not found for pubkey: {pubkey.to_hex_string()}")
