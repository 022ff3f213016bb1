"""Unsigned 64-bit integer type."""

from typing import Any

from pydantic import BeforeValidator, Field, PlainSerializer
from typing_extensions import Annotated

UINT64_MAX = 2**64
"""One past the largest unsigned 64-bit integer (2**64)."""


def _parse_quoted(value: Any) -> Any:
    """
    Accept a quoted decimal string in place of an integer.

    Beacon API JSON renders 64-bit integers as strings to avoid precision loss
    in clients whose JSON numbers are doubles.
    """
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    return value


Uint64 = Annotated[
    int,
    BeforeValidator(_parse_quoted),
    Field(ge=0, lt=UINT64_MAX),
    PlainSerializer(lambda value: str(value), return_type=str, when_used="json"),
]
"""A uint64 that is rendered as a quoted decimal string in JSON."""
