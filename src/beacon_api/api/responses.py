"""Response envelopes and views returned by the validator endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from beacon_api.containers import Gwei, Validator, ValidatorIndex
from beacon_api.types import StrictBaseModel

T = TypeVar("T")


class BeaconResponse(BaseModel, Generic[T]):
    """
    Standard Beacon API response envelope.

    Optimistic execution and finality are not tracked here, so both flags
    are always reported as false.
    """

    execution_optimistic: bool = False
    finalized: bool = False
    data: T


class ValidatorData(StrictBaseModel):
    """A validator record with its balance and derived status."""

    index: ValidatorIndex
    balance: Gwei
    status: str
    validator: Validator


class ValidatorBalance(StrictBaseModel):
    """One entry of a balance listing. Both fields are decimal strings."""

    index: str
    balance: str
