"""API route definitions."""

from collections.abc import Awaitable, Callable

from aiohttp import web

from .endpoints import health, metrics, validators

Handler = Callable[[web.Request], Awaitable[web.Response]]

ROUTES: list[tuple[str, str, Handler]] = [
    ("GET", "/eth/v1/node/health", health.handle),
    (
        "GET",
        "/eth/v1/beacon/states/{state_id}/validators/{validator_id}",
        validators.handle_validator,
    ),
    (
        "GET",
        "/eth/v1/beacon/states/{state_id}/validator_balances",
        validators.handle_validator_balances,
    ),
    (
        "POST",
        "/eth/v1/beacon/states/{state_id}/validator_balances",
        validators.handle_validator_balances_post,
    ),
    ("GET", "/metrics", metrics.handle),
]
"""All API routes as (method, path, handler)."""
