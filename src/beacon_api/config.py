"""
Global configuration for the beacon validator API.

This module contains environment-specific settings that apply across all modules.
"""

import os

_SUPPORTED_BEACON_ENVS: list[str] = ["prod", "test"]

BEACON_ENV = os.environ.get("BEACON_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if BEACON_ENV not in _SUPPORTED_BEACON_ENVS:
    raise ValueError(
        f"Invalid BEACON_ENV environment variable: '{BEACON_ENV}'. "
        f"Supported values: {_SUPPORTED_BEACON_ENVS}"
    )
