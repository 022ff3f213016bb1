"""Validator container."""

from __future__ import annotations

from beacon_api.types import Bytes32, Bytes48, Container, Uint64

from .slot import Epoch, Gwei

ValidatorIndex = Uint64
"""Position of a validator in the registry."""


class Validator(Container):
    """A validator's registry record."""

    pubkey: Bytes48
    """BLS public key identifying the validator."""

    withdrawal_credentials: Bytes32
    """Commitment to the withdrawal destination."""

    effective_balance: Gwei
    """Balance used for reward and penalty accounting."""

    slashed: bool
    """Whether the validator has been slashed."""

    activation_eligibility_epoch: Epoch
    """Epoch at which the validator became eligible for activation."""

    activation_epoch: Epoch
    """Epoch at which the validator was activated."""

    exit_epoch: Epoch
    """Epoch at which the validator exits, or FAR_FUTURE_EPOCH."""

    withdrawable_epoch: Epoch
    """Epoch at which the validator's balance becomes withdrawable."""

    def pubkey_string(self) -> str:
        """Return the public key in its canonical string form."""
        return self.pubkey.to_hex_string()
