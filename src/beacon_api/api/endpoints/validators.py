"""Validator endpoint handlers."""

from __future__ import annotations

import json
from collections.abc import Iterable

from aiohttp import web

from ..errors import BadRequest, ServiceUnavailable
from ..identifiers import parse_state_id, parse_validator_id
from ..responses import BeaconResponse, ValidatorBalance, ValidatorData
from ..validators import ValidatorQueryEngine

QUERY_ENGINE_KEY = web.AppKey("query_engine", ValidatorQueryEngine)
"""Application key holding the ValidatorQueryEngine."""


def _engine(request: web.Request) -> ValidatorQueryEngine:
    engine = request.app.get(QUERY_ENGINE_KEY)
    if engine is None:
        raise ServiceUnavailable("Database not initialized")
    return engine


def _json_response(envelope: BeaconResponse) -> web.Response:
    return web.Response(body=envelope.model_dump_json(), content_type="application/json")


def _split_ids(values: Iterable[str]) -> list[str]:
    """Flatten repeated and comma-separated ids, dropping blanks."""
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


async def handle_validator(request: web.Request) -> web.Response:
    """
    Handle single validator request.

    Path: /eth/v1/beacon/states/{state_id}/validators/{validator_id}

    Response: JSON envelope whose data holds index, balance (quoted decimals),
    status and the validator record.

    Status Codes:
        200 OK: Validator returned.
        400 Bad Request: Malformed state or validator ID.
        404 Not Found: State or validator not found.
        500 Internal Server Error: Database unreadable.
        503 Service Unavailable: Database not initialized.
    """
    engine = _engine(request)
    state_id = parse_state_id(request.match_info["state_id"])
    validator_id = parse_validator_id(request.match_info["validator_id"])

    data = await engine.get_validator(state_id, validator_id)
    return _json_response(BeaconResponse[ValidatorData](data=data))


async def handle_validator_balances(request: web.Request) -> web.Response:
    """
    Handle validator balances request.

    Path: /eth/v1/beacon/states/{state_id}/validator_balances
    Query: id (optional, repeatable, comma-separated) - indices or public keys.
    Omitting id, or passing no non-blank values, lists every validator.

    Status Codes:
        200 OK: Balances returned.
        400 Bad Request: Malformed state ID or more than 1000 ids.
        404 Not Found: State not found.
        500 Internal Server Error: Database unreadable.
        503 Service Unavailable: Database not initialized.
    """
    engine = _engine(request)
    state_id = parse_state_id(request.match_info["state_id"])
    ids = _split_ids(request.query.getall("id", []))

    balances = await engine.get_balances(state_id, ids)
    return _json_response(BeaconResponse[list[ValidatorBalance]](data=balances))


async def handle_validator_balances_post(request: web.Request) -> web.Response:
    """
    Handle validator balances request with ids in the body.

    Path: /eth/v1/beacon/states/{state_id}/validator_balances
    Body: JSON array of id strings. An empty or absent body lists every validator.

    Status Codes: as for the GET variant, plus 400 for a malformed body.
    """
    engine = _engine(request)
    state_id = parse_state_id(request.match_info["state_id"])

    ids: list[str] = []
    if request.can_read_body:
        try:
            body = await request.json()
        except json.JSONDecodeError as e:
            raise BadRequest("Request body is not valid JSON") from e
        if not isinstance(body, list) or not all(isinstance(item, str) for item in body):
            raise BadRequest("Request body must be a JSON array of validator ID strings")
        ids = body

    balances = await engine.get_balances(state_id, ids)
    return _json_response(BeaconResponse[list[ValidatorBalance]](data=balances))
