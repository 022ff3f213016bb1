"""Reusable type definitions for the beacon validator API."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, Bytes48
from .container import Container
from .uint import UINT64_MAX, Uint64

__all__ = [
    "Uint64",
    "UINT64_MAX",
    "BaseBytes",
    "Bytes32",
    "Bytes48",
    "StrictBaseModel",
    "Container",
]
