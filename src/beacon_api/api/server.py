"""
API server for validator queries, node status, and metrics endpoints.

Provides HTTP endpoints for:
- /eth/v1/beacon/states/{state_id}/validators/{validator_id} - One validator with status
- /eth/v1/beacon/states/{state_id}/validator_balances - Filtered balance listing
- /eth/v1/node/health - Health check endpoint
- /metrics - Prometheus metrics endpoint
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field

from aiohttp import web

from beacon_api.metrics import api_request_time, api_requests
from beacon_api.storage import Database

from .endpoints.validators import QUERY_ENGINE_KEY
from .errors import ApiError
from .resolver import StateResolver
from .routes import ROUTES, Handler
from .validators import ValidatorQueryEngine

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """
    Render API errors as JSON and record request metrics.

    Errors raised by a query become the matching HTTP error with a
    `{"code", "message"}` body. Nothing is written before the query completes,
    so a failed request never emits a partial envelope.
    """
    route = request.match_info.route.resource
    endpoint = route.canonical if route is not None else "unmatched"
    start = time.perf_counter()
    status = 500

    try:
        response = await handler(request)
        status = response.status
        return response
    except ApiError as e:
        status = e.status_code
        logger.info(f"{request.method} {request.path} -> {status}: {e.message}")
        raise e.to_http() from e
    except web.HTTPException as e:
        status = e.status
        raise
    finally:
        api_requests.labels(endpoint=endpoint, status=str(status)).inc()
        api_request_time.labels(endpoint=endpoint).observe(time.perf_counter() - start)


def create_app(database: Database | None) -> web.Application:
    """
    Build the aiohttp application.

    Args:
        database: Database to serve from. None serves 503 for validator queries.
    """
    app = web.Application(middlewares=[error_middleware])
    if database is not None:
        app[QUERY_ENGINE_KEY] = ValidatorQueryEngine(StateResolver(database))
    app.add_routes([web.route(method, path, handler) for method, path, handler in ROUTES])
    return app


@dataclass(frozen=True, slots=True)
class ApiServerConfig:
    """Configuration for the API server."""

    host: str = "0.0.0.0"
    """Host address to bind to."""

    port: int = 5052
    """Port to listen on."""

    enabled: bool = True
    """Whether the API server is enabled."""


@dataclass(slots=True)
class ApiServer:
    """
    HTTP API server for validator queries.

    Uses aiohttp to handle HTTP protocol details efficiently.
    """

    config: ApiServerConfig
    """Server configuration."""

    database: Database | None = None
    """Database the queries read from."""

    _runner: web.AppRunner | None = field(default=None, init=False)
    """The aiohttp application runner."""

    _site: web.TCPSite | None = field(default=None, init=False)
    """The TCP site for the server."""

    async def start(self) -> None:
        """Start the API server in the background."""
        if not self.config.enabled:
            logger.info("API server is disabled")
            return

        self._runner = web.AppRunner(create_app(self.database))
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self.config.host, self.config.port)
        await self._site.start()

        logger.info(f"API server listening on {self.config.host}:{self.config.port}")

    async def run(self) -> None:
        """
        Run the API server until shutdown.

        This method blocks until stop() is called.
        """
        await self.start()

        while self._runner is not None:
            await asyncio.sleep(1)

    def stop(self) -> None:
        """Request graceful shutdown."""
        if self._runner is not None:
            asyncio.create_task(self._async_stop())

    async def _async_stop(self) -> None:
        """Gracefully stop the server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("API server stopped")
