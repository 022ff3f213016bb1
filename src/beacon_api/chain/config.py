"""
Chain Configuration

Defines the consensus parameters the validator queries depend on. The preset
is chosen by the global `BEACON_ENV` flag: `prod` uses the mainnet preset and
`test` uses the minimal preset.
"""

from typing_extensions import Final

from beacon_api.config import BEACON_ENV
from beacon_api.types import UINT64_MAX

_SLOTS_PER_EPOCH_BY_ENV: Final = {"prod": 32, "test": 8}

SLOTS_PER_EPOCH: Final = _SLOTS_PER_EPOCH_BY_ENV[BEACON_ENV]
"""Number of slots in one epoch."""

FAR_FUTURE_EPOCH: Final = UINT64_MAX - 1
"""Sentinel epoch meaning "never" (e.g. a validator that has not exited)."""
