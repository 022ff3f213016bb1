"""Tests for the validator API client."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import pytest

from beacon_api.api import (
    ApiServer,
    ApiServerConfig,
    BeaconApiClientError,
    fetch_validator,
    fetch_validator_balances,
)
from beacon_api.storage import SQLiteDatabase
from tests.beacon_api.helpers import SeededChain, make_pubkey


def against_server(port: int, db: SQLiteDatabase, call: Callable[[str], Awaitable[object]]):
    """Run `call(base_url)` against a live server and return its result."""

    async def run_test() -> object:
        server = ApiServer(config=ApiServerConfig(host="127.0.0.1", port=port), database=db)
        await server.start()
        try:
            return await call(f"http://127.0.0.1:{port}")
        finally:
            server.stop()
            await asyncio.sleep(0.1)

    return asyncio.run(run_test())


class TestFetchValidator:
    """Tests for fetch_validator."""

    def test_returns_validator_data(self, db: SQLiteDatabase, chain: SeededChain) -> None:
        """The response is parsed into ValidatorData."""
        data = against_server(15180, db, lambda url: fetch_validator(url, "genesis", "1"))

        assert data.index == 1
        assert data.balance == 31_500_000_000
        assert data.validator.pubkey == make_pubkey(1)

    def test_error_carries_server_message(self, db: SQLiteDatabase, chain: SeededChain) -> None:
        """Error responses raise with the status and the server's message."""
        with pytest.raises(BeaconApiClientError, match="Validator not found") as exc_info:
            against_server(15181, db, lambda url: fetch_validator(url, "head", "42"))

        assert exc_info.value.status_code == 404

    def test_network_error(self) -> None:
        """An unreachable node raises a network error."""
        with pytest.raises(BeaconApiClientError, match="Network error"):
            asyncio.run(fetch_validator("http://127.0.0.1:1", "head", "0"))


class TestFetchValidatorBalances:
    """Tests for fetch_validator_balances."""

    def test_filtered(self, db: SQLiteDatabase, chain: SeededChain) -> None:
        """ids are sent as repeated query parameters."""
        balances = against_server(
            15182,
            db,
            lambda url: fetch_validator_balances(
                url, "genesis", ["0", make_pubkey(2).to_hex_string()]
            ),
        )

        assert [(b.index, b.balance) for b in balances] == [("0", "32000000000"), ("2", "0")]

    def test_unfiltered(self, db: SQLiteDatabase, chain: SeededChain) -> None:
        """Without ids every balance is returned."""
        balances = against_server(15183, db, lambda url: fetch_validator_balances(url, "40"))

        assert len(balances) == 3
