"""
API error taxonomy.

Every failure a query can end in is one of these kinds. Each kind carries
the HTTP status it is surfaced as; handlers convert errors to aiohttp
exceptions with a Beacon API JSON error body.
"""

from __future__ import annotations

import json
from typing import ClassVar

from aiohttp import web


class ApiError(Exception):
    """
    Base class for errors returned to API clients.

    Attributes:
        message: Human-readable error description sent to the client.
    """

    status_code: ClassVar[int] = 500
    http_exception: ClassVar[type[web.HTTPException]] = web.HTTPInternalServerError

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def to_json(self) -> dict[str, int | str]:
        """Return the Beacon API error body."""
        return {"code": self.status_code, "message": self.message}

    def to_http(self) -> web.HTTPException:
        """Build the aiohttp exception that renders this error."""
        return self.http_exception(
            text=json.dumps(self.to_json()),
            content_type="application/json",
        )


class NotFound(ApiError):
    """A state, the chain head, or a snapshot entry does not exist."""

    status_code = 404
    http_exception = web.HTTPNotFound


class ValidatorNotFound(ApiError):
    """No validator matches the requested index or public key."""

    status_code = 404
    http_exception = web.HTTPNotFound


class BadRequest(ApiError):
    """The request could not be parsed."""

    status_code = 400
    http_exception = web.HTTPBadRequest


class TooManyValidatorIds(ApiError):
    """A balance filter names more validators than allowed."""

    status_code = 400
    http_exception = web.HTTPBadRequest


class ServiceUnavailable(ApiError):
    """The server has no database to answer from."""

    status_code = 503
    http_exception = web.HTTPServiceUnavailable


class InternalError(ApiError):
    """
    The store could not be read.

    The message is fixed so that no internal detail reaches the client.
    """

    status_code = 500
    http_exception = web.HTTPInternalServerError

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
