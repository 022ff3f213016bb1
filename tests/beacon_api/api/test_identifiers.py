"""Tests for state and validator identifier parsing."""

from __future__ import annotations

import pytest

from beacon_api.api import (
    BadRequest,
    IndexValidatorId,
    PubkeyValidatorId,
    RootStateId,
    SlotStateId,
    StateTag,
    ValidatorNotFound,
    parse_state_id,
    parse_validator_id,
)
from beacon_api.types import UINT64_MAX, Bytes32, Bytes48


class TestParseStateId:
    """Tests for state identifier parsing."""

    @pytest.mark.parametrize("tag", list(StateTag))
    def test_symbolic_tags(self, tag: StateTag) -> None:
        """Each symbolic tag parses to itself."""
        assert parse_state_id(tag.value) is tag

    def test_slot(self) -> None:
        """A decimal number is a slot."""
        assert parse_state_id("12345") == SlotStateId(12345)

    def test_root(self) -> None:
        """A 0x-prefixed 32-byte hex string is a root."""
        text = "0x" + "ab" * 32
        assert parse_state_id(text) == RootStateId(Bytes32(text))

    @pytest.mark.parametrize(
        "text",
        ["", "latest", "-1", str(UINT64_MAX), "0x" + "ab" * 31, "ab" * 32, "1.5", "5\n"],
    )
    def test_invalid(self, text: str) -> None:
        """Anything else is a bad request."""
        with pytest.raises(BadRequest, match="Invalid state ID"):
            parse_state_id(text)

    def test_overlong_slot_is_bad_request(self) -> None:
        """A slot with thousands of digits is rejected without integer conversion."""
        with pytest.raises(BadRequest, match="Invalid state ID"):
            parse_state_id("9" * 5000)

    def test_leading_zeros_do_not_count_toward_length(self) -> None:
        """Zero padding on a small slot still parses."""
        assert parse_state_id("0" * 30 + "42") == SlotStateId(42)

    def test_str_round_trips(self) -> None:
        """The string form of a parsed identifier parses back to it."""
        for text in ("head", "42", "0x" + "cd" * 32):
            assert str(parse_state_id(text)) == text


class TestParseValidatorId:
    """Tests for validator identifier parsing."""

    @pytest.mark.parametrize("text", ["0", "7", "-1", "99999999999999999999", "-" + "0" * 40 + "3"])
    def test_index(self, text: str) -> None:
        """Decimal numbers parse as indices without range checks."""
        assert parse_validator_id(text) == IndexValidatorId(int(text))

    def test_pubkey(self) -> None:
        """A 0x-prefixed 48-byte hex string is a public key."""
        text = "0x" + "11" * 48
        assert parse_validator_id(text) == PubkeyValidatorId(Bytes48(text))

    @pytest.mark.parametrize("text", ["", "abc", "0x" + "11" * 47, "0x" + "11" * 32])
    def test_invalid(self, text: str) -> None:
        """Anything else is a bad request."""
        with pytest.raises(BadRequest, match="Invalid validator ID"):
            parse_validator_id(text)

    @pytest.mark.parametrize("text", ["9" * 5000, "-" + "9" * 5000, "1" + "0" * 20])
    def test_overlong_index_is_not_found(self, text: str) -> None:
        """Indices too long for any u64 fail lookup without integer conversion."""
        with pytest.raises(ValidatorNotFound, match="Validator not found for index"):
            parse_validator_id(text)
