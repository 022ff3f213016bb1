"""
Client for the validator endpoints of a beacon node API.

Wraps the two validator queries in typed calls. Responses are validated into
the same models the server produces.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from .responses import BeaconResponse, ValidatorBalance, ValidatorData

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
"""HTTP request timeout in seconds."""

STATES_ENDPOINT = "/eth/v1/beacon/states"
"""Prefix of the state-scoped endpoints."""


class BeaconApiClientError(Exception):
    """
    Error while querying a beacon node.

    Attributes:
        status_code: HTTP status of the failed response, if one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response) -> str:
    """Extract the message of a Beacon API error body, falling back to raw text."""
    try:
        return str(response.json()["message"])
    except (ValueError, KeyError, TypeError):
        return response.text[:200]


async def _get(url: str, params: dict[str, list[str]] | None = None) -> bytes:
    try:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
            response = await client.get(url, params=params, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.content

    except httpx.RequestError as exc:
        raise BeaconApiClientError(
            f"Network error while connecting to {exc.request.url}: {exc}"
        ) from exc
    except httpx.HTTPStatusError as exc:
        raise BeaconApiClientError(
            f"HTTP error {exc.response.status_code}: {_error_message(exc.response)}",
            status_code=exc.response.status_code,
        ) from exc


async def fetch_validator(url: str, state_id: str, validator_id: str) -> ValidatorData:
    """
    Fetch one validator from a beacon node.

    Args:
        url: Base URL of the node API (e.g., "http://localhost:5052").
        state_id: State identifier (slot, 0x root, or head/genesis/justified/finalized).
        validator_id: Validator index or 0x public key.

    Raises:
        BeaconApiClientError: If the request fails or the response is malformed.
    """
    full_url = f"{url.rstrip('/')}{STATES_ENDPOINT}/{state_id}/validators/{validator_id}"
    logger.debug(f"Fetching validator from {full_url}")

    content = await _get(full_url)
    try:
        return BeaconResponse[ValidatorData].model_validate_json(content).data
    except ValidationError as e:
        raise BeaconApiClientError(f"Malformed validator response: {e}") from e


async def fetch_validator_balances(
    url: str,
    state_id: str,
    ids: Sequence[str] | None = None,
) -> list[ValidatorBalance]:
    """
    Fetch validator balances from a beacon node.

    Args:
        url: Base URL of the node API.
        state_id: State identifier.
        ids: Optional indices or public keys to restrict the listing to.

    Raises:
        BeaconApiClientError: If the request fails or the response is malformed.
    """
    full_url = f"{url.rstrip('/')}{STATES_ENDPOINT}/{state_id}/validator_balances"
    params = {"id": list(ids)} if ids else None

    content = await _get(full_url, params)
    try:
        return BeaconResponse[list[ValidatorBalance]].model_validate_json(content).data
    except ValidationError as e:
        raise BeaconApiClientError(f"Malformed balances response: {e}") from e
