"""Tests for the Uint64 type."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from beacon_api.types import UINT64_MAX, Uint64


class _Holder(BaseModel):
    value: Uint64


class TestUint64Validation:
    """Tests for range checking and input coercion."""

    def test_accepts_bounds(self) -> None:
        """Zero and 2**64 - 1 are valid."""
        assert _Holder(value=0).value == 0
        assert _Holder(value=UINT64_MAX - 1).value == UINT64_MAX - 1

    @pytest.mark.parametrize("value", [-1, UINT64_MAX])
    def test_rejects_out_of_range(self, value: int) -> None:
        """Values outside [0, 2**64) are rejected."""
        with pytest.raises(ValidationError):
            _Holder(value=value)

    def test_accepts_quoted_decimal(self) -> None:
        """A quoted decimal string is parsed as an integer."""
        assert _Holder.model_validate_json('{"value": "18446744073709551615"}').value == (
            UINT64_MAX - 1
        )

    def test_rejects_non_decimal_string(self) -> None:
        """A string that is not a decimal number is rejected."""
        with pytest.raises(ValidationError):
            _Holder.model_validate_json('{"value": "0x10"}')


class TestUint64Serialization:
    """Tests for JSON rendering."""

    def test_json_is_quoted(self) -> None:
        """JSON output renders the integer as a string."""
        assert _Holder(value=32_000_000_000).model_dump_json() == '{"value":"32000000000"}'

    def test_python_dump_keeps_int(self) -> None:
        """Python-mode dumps keep the integer type."""
        assert _Holder(value=7).model_dump() == {"value": 7}
